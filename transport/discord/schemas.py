"""
Discord Interaction Schemas

PURE DATA MODELS - NO LOGIC
Inbound request, decoded interaction envelope, and the reply variants
the dispatcher hands to the envelope renderer.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# PROTOCOL CONSTANTS
# ============================================================================

class InteractionType(IntEnum):
    """Inbound interaction kinds we answer."""
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    """Outbound response kinds we emit."""
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4


# Interactions without a "type" field fall back to this value, which is
# not a known InteractionType and so ends up as a bad request.
UNKNOWN_INTERACTION_TYPE = 0

CATEGORY_OPTION = "category"


# ============================================================================
# RAW REQUEST (INPUT)
# ============================================================================

@dataclass(frozen=True)
class RawRequest:
    """
    Fully buffered HTTP request as handed over by the HTTP layer.

    The signature covers the exact body bytes, so the body is kept raw
    and parsed only after verification.
    """

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


# ============================================================================
# INTERACTION ENVELOPE (DECODED BODY)
# ============================================================================

class CommandOption(BaseModel):
    """A single option the user filled in when invoking a command."""

    name: str
    value: Union[str, int, float, bool]

    class Config:
        extra = "allow"  # Discord sends "type", "focused", ...


class InteractionData(BaseModel):
    """Command payload of an ApplicationCommand interaction."""

    options: Optional[list[CommandOption]] = None

    class Config:
        extra = "allow"

    def option(self, name: str) -> Optional[CommandOption]:
        """First option called `name`, if the user supplied it."""
        for option in self.options or []:
            if option.name == name:
                return option
        return None


class Interaction(BaseModel):
    """
    Decoded interaction envelope.

    ref: https://discord.com/developers/docs/interactions/receiving-and-responding
    """

    type: int = Field(
        UNKNOWN_INTERACTION_TYPE,
        description="Interaction type. Missing means 0 (unrecognized).",
    )
    data: Optional[InteractionData] = None

    class Config:
        extra = "allow"  # id, token, member, guild_id, ... are not needed
        frozen = True

    @field_validator("type", mode="before")
    @classmethod
    def reject_boolean_type(cls, value):
        """JSON true/false is not a type tag, even though int() would take it."""
        if isinstance(value, bool):
            raise ValueError("interaction type must be an integer, not a boolean")
        return value

    def category(self) -> Optional[str]:
        """Value of the "category" option when it is a string, else None."""
        if self.data is None:
            return None
        option = self.data.option(CATEGORY_OPTION)
        if option is None or not isinstance(option.value, str):
            return None
        return option.value


# ============================================================================
# REPLY PAYLOADS (OUTPUT)
# ============================================================================

@dataclass(frozen=True)
class Pong:
    """Answer to a Ping."""

    status_code: int = 200


@dataclass(frozen=True)
class Message:
    """Channel message answering a command."""

    content: str
    status_code: int = 200


@dataclass(frozen=True)
class ErrorReply:
    """Request rejected before or during dispatch."""

    message: str
    status_code: int = 400


ReplyPayload = Union[Pong, Message, ErrorReply]
