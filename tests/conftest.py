"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Callable

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from content import freeze_table  # noqa: E402
from transport.discord import HEADER_SIGNATURE, HEADER_TIMESTAMP  # noqa: E402

TIMESTAMP = "1700000000"


@pytest.fixture
def private_key() -> Ed25519PrivateKey:
    """Fresh Ed25519 signing key standing in for Discord."""
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key_hex(private_key) -> str:
    """Matching public key as configured in DISCORD_PUBLIC_KEY."""
    return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw).hex()


@pytest.fixture
def sign(private_key) -> Callable[..., str]:
    """Sign timestamp + body the way Discord does; returns hex signature."""
    def _sign(body: bytes, timestamp: str = TIMESTAMP) -> str:
        return private_key.sign(timestamp.encode("utf-8") + body).hex()
    return _sign


@pytest.fixture
def signed_headers(sign) -> Callable[..., dict]:
    """Headers for a correctly signed request."""
    def _headers(body: bytes, timestamp: str = TIMESTAMP) -> dict:
        return {
            HEADER_SIGNATURE: sign(body, timestamp),
            HEADER_TIMESTAMP: timestamp,
        }
    return _headers


@pytest.fixture
def content_table():
    """Small table with disjoint categories."""
    return freeze_table({
        "cat": ["(=^･ω･^=)", "ฅ^•ﻌ•^ฅ"],
        "bear": ["ʕ•ᴥ•ʔ"],
        "shrug": ["¯\\_(ツ)_/¯", "┐(´ー｀)┌"],
    })
