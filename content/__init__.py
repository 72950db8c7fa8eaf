"""Content Table - Module Exports"""

from .dongers import DONGERS
from .errors import ContentError, ContentTableError, EmptyTableError
from .selector import select_content
from .table import ContentTable, categories, freeze_table, load_content_table

__all__ = [
    # Data
    "DONGERS",
    "ContentTable",
    # Table
    "freeze_table",
    "load_content_table",
    "categories",
    # Selection
    "select_content",
    # Errors
    "ContentError",
    "ContentTableError",
    "EmptyTableError",
]
