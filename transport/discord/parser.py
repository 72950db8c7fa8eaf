"""
Discord Interaction Parsing

PURE CONVERSION - NO DISPATCH

Decodes the (already verified) request body into an Interaction.
Shape mismatches fail closed with InvalidPayloadError instead of
producing half-empty envelopes.
"""

from typing import Union

from pydantic import ValidationError

from .errors import InvalidPayloadError
from .schemas import Interaction


def parse_interaction(body: Union[str, bytes]) -> Interaction:
    """
    Decode a request body into an Interaction envelope.

    A missing "type" decodes as 0; that is a documented default, not an
    error. A "type" that is present but not an integer is an error.

    Args:
        body: Raw body text or bytes (JSON object)

    Returns:
        Interaction

    Raises:
        InvalidPayloadError: Not JSON, not an object, or wrong field shapes
    """

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidPayloadError("Interaction body is not UTF-8") from e

    try:
        return Interaction.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(
            f"Invalid interaction payload ({e.error_count()} errors)"
        ) from e
