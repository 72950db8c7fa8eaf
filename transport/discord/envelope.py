"""
Discord Response Envelope

PURE FORMATTING - NO BUSINESS LOGIC
Serializes a ReplyPayload into the JSON body Discord expects.
"""

import json
from dataclasses import dataclass
from typing import Any

from fastapi import Response

from .schemas import ErrorReply, InteractionResponseType, Message, Pong, ReplyPayload

CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RenderedResponse:
    """Status, content type and body ready for the HTTP layer."""

    status_code: int
    content_type: str
    body: bytes

    def json(self) -> Any:
        return json.loads(self.body)


def _payload_body(payload: ReplyPayload) -> dict[str, Any]:
    if isinstance(payload, Pong):
        return {"type": int(InteractionResponseType.PONG)}

    if isinstance(payload, Message):
        return {
            "type": int(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
            "data": {"content": payload.content},
        }

    if isinstance(payload, ErrorReply):
        return {"error": payload.message}

    raise TypeError(f"Unknown reply payload: {type(payload).__name__}")


def render(payload: ReplyPayload) -> RenderedResponse:
    """
    Render a reply payload.

    Shapes:
    - Pong:       {"type": 1}
    - Message:    {"type": 4, "data": {"content": "..."}}
    - ErrorReply: {"error": "..."}
    """
    body = json.dumps(
        _payload_body(payload),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
    return RenderedResponse(
        status_code=payload.status_code,
        content_type=CONTENT_TYPE,
        body=body,
    )


def to_response(rendered: RenderedResponse) -> Response:
    """Wrap a rendered envelope in a FastAPI response."""
    return Response(
        content=rendered.body,
        status_code=rendered.status_code,
        media_type=rendered.content_type,
    )
