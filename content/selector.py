"""Random content selection."""

import random
from typing import Optional

from .errors import EmptyTableError
from .table import ContentTable


def select_content(
    table: ContentTable,
    category: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Pick one string uniformly at random.

    A known category draws from that category only. A missing or unknown
    category draws from every category combined; an unknown name is not
    an error, it just widens the pool.

    Raises:
        EmptyTableError: Nothing to pick from
    """
    if category is not None and category in table:
        candidates = list(table[category])
    else:
        candidates = [entry for entries in table.values() for entry in entries]

    if not candidates:
        raise EmptyTableError(
            f"No content available for category {category!r}"
            if category in table
            else "Content table is empty"
        )

    return (rng or random).choice(candidates)
