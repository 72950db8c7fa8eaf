"""
Discord Interaction Errors

Internal failure taxonomy. None of these reach the client as-is:
the dispatcher collapses them into 401 / 400 replies.
"""


class InteractionError(Exception):
    """Base class for interaction handling failures."""
    pass


class MalformedEncodingError(InteractionError, ValueError):
    """Hex string could not be decoded."""
    pass


class InvalidPayloadError(InteractionError):
    """Request body is not a well-formed interaction."""
    pass
