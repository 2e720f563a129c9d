"""Domain models for Tariff Search.

- document: Document, the normalized record shape
- search: SearchClause and SortOrder used to describe a search

    from tariff_search.core.domain import Document, SearchClause, SortOrder
"""

from .document import Document
from .search import FUZZY_MAX_EDITS, SearchClause, SortOrder

__all__ = [
    "Document",
    "SearchClause",
    "SortOrder",
    "FUZZY_MAX_EDITS",
]
