"""
Content Table Loading

Loads the category -> strings table once at startup and freezes it.
Validation happens here so a bad table stops the server from starting
instead of failing individual requests.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

from .dongers import DONGERS
from .errors import ContentTableError, EmptyTableError

logger = logging.getLogger(__name__)

ContentTable = Mapping[str, Sequence[str]]


def freeze_table(table: Mapping[str, Any]) -> ContentTable:
    """
    Validate a raw table and return a read-only copy.

    Every key must be a string and every category a non-empty list of
    strings. Category order is preserved.

    Raises:
        ContentTableError: Wrong shape
        EmptyTableError: No categories, or an empty category
    """
    if not isinstance(table, Mapping):
        raise ContentTableError(
            f"Content table must be a mapping, got {type(table).__name__}"
        )

    if not table:
        raise EmptyTableError("Content table has no categories")

    frozen: dict[str, tuple[str, ...]] = {}
    for name, entries in table.items():
        if not isinstance(name, str):
            raise ContentTableError(f"Category name must be a string: {name!r}")

        if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
            raise ContentTableError(f"Category {name!r} must be a list of strings")

        if not entries:
            raise EmptyTableError(f"Category {name!r} is empty")

        if not all(isinstance(entry, str) for entry in entries):
            raise ContentTableError(f"Category {name!r} contains non-string entries")

        frozen[name] = tuple(entries)

    return MappingProxyType(frozen)


def load_content_table(path: Optional[Union[str, Path]] = None) -> ContentTable:
    """
    Load the content table.

    Args:
        path: JSON file holding {"category": ["...", ...]}. None means the
            bundled donger table.

    Returns:
        Frozen content table

    Raises:
        ContentTableError: Unreadable file, invalid JSON or wrong shape
        EmptyTableError: Empty table or category
    """
    if path is None:
        logger.info("Using bundled donger table")
        return freeze_table(DONGERS)

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ContentTableError(f"Cannot read content table {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ContentTableError(f"Invalid JSON in content table {path}: {e}") from e

    table = freeze_table(raw)
    logger.info(f"Loaded content table from {path} ({len(table)} categories)")
    return table


def categories(table: ContentTable) -> list[str]:
    """Category names in table order."""
    return list(table.keys())
