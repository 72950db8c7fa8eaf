"""
Discord Signature Verification

SECURITY BOUNDARY - Verify the Ed25519 detached signature Discord puts on
every interaction.
No parsing. No dispatch. Returns a bool and nothing else.
"""

import logging
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .codec import decode_hex
from .errors import MalformedEncodingError
from .schemas import RawRequest

logger = logging.getLogger(__name__)

HEADER_SIGNATURE = "X-Signature-Ed25519"
HEADER_TIMESTAMP = "X-Signature-Timestamp"

SIGNATURE_LENGTH = 64
PUBLIC_KEY_LENGTH = 32


def verify_signature(
    timestamp: Optional[str],
    body: bytes,
    signature_hex: Optional[str],
    public_key_hex: str,
) -> bool:
    """
    Verify an Ed25519 signature over timestamp + body.

    Discord signs the UTF-8 timestamp header immediately followed by the
    raw request body. The timestamp is used verbatim.

    Every failure (missing header, bad hex, wrong length, bad signature)
    yields False so callers cannot tell which check tripped.

    Args:
        timestamp: X-Signature-Timestamp header value
        body: Raw request body bytes
        signature_hex: X-Signature-Ed25519 header value
        public_key_hex: Application public key (hex)

    Returns:
        True only if the signature is valid for this key
    """

    if not timestamp or not signature_hex:
        return False

    try:
        signature = decode_hex(signature_hex)
        public_key = decode_hex(public_key_hex)
    except MalformedEncodingError:
        return False

    if len(signature) != SIGNATURE_LENGTH or len(public_key) != PUBLIC_KEY_LENGTH:
        return False

    try:
        key = Ed25519PublicKey.from_public_bytes(public_key)
        key.verify(signature, timestamp.encode("utf-8") + body)
    except (InvalidSignature, ValueError):
        return False

    return True


def verify_request(request: RawRequest, public_key_hex: str) -> bool:
    """Verify the signature headers of a buffered request."""
    valid = verify_signature(
        request.header(HEADER_TIMESTAMP),
        request.body,
        request.header(HEADER_SIGNATURE),
        public_key_hex,
    )
    if not valid:
        logger.debug("Signature verification failed")
    return valid
