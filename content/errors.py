"""Content table errors."""


class ContentError(Exception):
    """Base class for content table failures."""
    pass


class ContentTableError(ContentError):
    """Content table is malformed or could not be loaded."""
    pass


class EmptyTableError(ContentError):
    """No candidates to pick from."""
    pass
