"""Hex decoding for signatures and public keys."""

from .errors import MalformedEncodingError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(value: str) -> bytes:
    """
    Decode a hexadecimal string into raw bytes.

    Stricter than bytes.fromhex: whitespace is rejected, and so is
    an empty string.

    Raises:
        MalformedEncodingError: Empty, odd length, or non-hex characters
    """
    if not value:
        raise MalformedEncodingError("Empty hex string")

    if len(value) % 2:
        raise MalformedEncodingError(f"Odd-length hex string ({len(value)} chars)")

    if not _HEX_DIGITS.issuperset(value):
        raise MalformedEncodingError("Non-hex character in string")

    return bytes.fromhex(value)
