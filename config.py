"""
Configuration management for the donger interactions bot.

Loads environment variables from .env file and provides typed access to configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from transport.discord.codec import decode_hex
from transport.discord.errors import MalformedEncodingError
from transport.discord.security import PUBLIC_KEY_LENGTH

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class ConfigError(Exception):
    """Required configuration is missing or invalid. Fatal at startup."""
    pass


@dataclass(frozen=True)
class Config:
    """Configuration for the interactions endpoint."""

    # Discord application
    discord_public_key: str

    # Content table (None = bundled dongers)
    content_table_path: Optional[str]

    # Server
    port: int
    environment: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Read configuration from the current environment."""
        return cls(
            discord_public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
            content_table_path=os.getenv("CONTENT_TABLE_PATH") or None,
            port=int(os.getenv("PORT", "8000")),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """
        Check that required configuration is set and well-formed.

        Raises:
            ConfigError: DISCORD_PUBLIC_KEY missing, not hex, or not 32 bytes,
                or LOG_LEVEL is not a logging level name
        """
        if not self.discord_public_key:
            raise ConfigError("Missing required environment variable: DISCORD_PUBLIC_KEY")

        try:
            key = decode_hex(self.discord_public_key)
        except MalformedEncodingError as e:
            raise ConfigError(f"DISCORD_PUBLIC_KEY is not valid hex: {e}") from e

        if len(key) != PUBLIC_KEY_LENGTH:
            raise ConfigError(
                f"DISCORD_PUBLIC_KEY must be {PUBLIC_KEY_LENGTH} bytes "
                f"({PUBLIC_KEY_LENGTH * 2} hex chars), got {len(key)}"
            )

        if self.log_level not in logging.getLevelNamesMapping():
            raise ConfigError(f"LOG_LEVEL is not a logging level: {self.log_level}")


if __name__ == "__main__":
    # Test configuration loading
    config = Config.from_env()
    print("Configuration loaded:")
    print(f"  Discord Public Key: {'✓ Set' if config.discord_public_key else '✗ Missing'}")
    print(f"  Content Table: {config.content_table_path or 'bundled dongers'}")
    print(f"  Port: {config.port}")
    print(f"  Environment: {config.environment}")
    print(f"  Log Level: {config.log_level}")
    try:
        config.validate()
        print("\n  Validation: ✓ PASSED")
    except ConfigError as e:
        print(f"\n  Validation: ✗ FAILED ({e})")
