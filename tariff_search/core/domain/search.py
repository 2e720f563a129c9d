"""Search request models: clauses and sort order."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Edit distance tolerated by every fuzzy text clause
FUZZY_MAX_EDITS = 2


class SortOrder(Enum):
    """Ordering applied to a result set after both collections are unioned.

    Attributes:
        RELEVANCE: Descending search score (default).
        FILENAME: Ascending file name.
        PAGECOUNT: Descending page count.
    """

    RELEVANCE = "relevance"
    FILENAME = "filename"
    PAGECOUNT = "pagecount"

    @classmethod
    def parse(cls, value: "str | SortOrder | None") -> "SortOrder":
        """Resolve a user-supplied sort directive, case-insensitively.

        Unknown or missing values fall back to ``RELEVANCE``.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.RELEVANCE
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.RELEVANCE


@dataclass(frozen=True)
class SearchClause:
    """Fuzzy full-text match of ``query`` against one or more fields."""

    query: str
    paths: tuple[str, ...]
    max_edits: int = FUZZY_MAX_EDITS

    def to_operator(self) -> dict[str, Any]:
        """Render as an Atlas Search ``text`` operator."""
        path: str | list[str] = self.paths[0] if len(self.paths) == 1 else list(self.paths)
        return {
            "text": {
                "query": self.query,
                "path": path,
                "fuzzy": {"maxEdits": self.max_edits},
            }
        }
