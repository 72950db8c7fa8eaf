"""Discord Transport Layer - Module Exports"""

from .codec import decode_hex
from .dispatcher import BAD_REQUEST, UNSIGNED_REQUEST, InteractionDispatcher
from .envelope import CONTENT_TYPE, RenderedResponse, render, to_response
from .errors import InteractionError, InvalidPayloadError, MalformedEncodingError
from .parser import parse_interaction
from .schemas import (
    CommandOption,
    ErrorReply,
    Interaction,
    InteractionData,
    InteractionResponseType,
    InteractionType,
    Message,
    Pong,
    RawRequest,
    ReplyPayload,
)
from .security import (
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    verify_request,
    verify_signature,
)
from .webhook import get_dispatcher, router

__all__ = [
    # Schemas
    "RawRequest",
    "Interaction",
    "InteractionData",
    "CommandOption",
    "InteractionType",
    "InteractionResponseType",
    "Pong",
    "Message",
    "ErrorReply",
    "ReplyPayload",
    # Codec
    "decode_hex",
    # Security
    "verify_signature",
    "verify_request",
    "HEADER_SIGNATURE",
    "HEADER_TIMESTAMP",
    "SIGNATURE_LENGTH",
    "PUBLIC_KEY_LENGTH",
    # Parsing
    "parse_interaction",
    # Dispatch
    "InteractionDispatcher",
    "UNSIGNED_REQUEST",
    "BAD_REQUEST",
    # Envelope
    "render",
    "to_response",
    "RenderedResponse",
    "CONTENT_TYPE",
    # Errors
    "InteractionError",
    "MalformedEncodingError",
    "InvalidPayloadError",
    # Router
    "router",
    "get_dispatcher",
]
