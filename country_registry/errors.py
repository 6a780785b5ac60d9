from typing import Any


class CountryNotFound(LookupError):
    """Raised when a lookup matches no country record.

    The original query is kept on ``.query`` so callers can report it.
    """

    def __init__(self, query: Any, kind: str = "country"):
        self.query = query
        self.kind = kind
        super().__init__(f"no {kind} matches {query!r}")


class TableIntegrityError(ValueError):
    """Raised while building a table whose records break a uniqueness rule."""
