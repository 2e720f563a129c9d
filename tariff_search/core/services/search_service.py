"""Search orchestration: which clauses to build and when to query at all."""

from __future__ import annotations

import logging

from ..domain import Document, SearchClause, SortOrder
from ..domain.exceptions import ConfigurationError
from ..ports.document_store_port import DocumentStorePort

logger = logging.getLogger(__name__)

FILENAME_FIELDS = ("FileName",)
AUTHOR_FIELDS = ("Author", "Creator")
CONTENT_FIELDS = ("Text", "Title", "Subject")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def build_search_clauses(
    filename: str | None = None,
    author: str | None = None,
    content: str | None = None,
) -> list[SearchClause]:
    """Build one fuzzy clause per non-blank filter.

    Clause order is filename, author, content. Queries are passed through
    unchanged; whitespace only decides whether a filter counts.
    """
    clauses: list[SearchClause] = []

    if not is_blank(filename):
        clauses.append(SearchClause(query=filename, paths=FILENAME_FIELDS))

    # Author matches either metadata field
    if not is_blank(author):
        clauses.append(SearchClause(query=author, paths=AUTHOR_FIELDS))

    if not is_blank(content):
        clauses.append(SearchClause(query=content, paths=CONTENT_FIELDS))

    return clauses


class SearchService:
    """Application service behind the search and download endpoints."""

    def __init__(self, store: DocumentStorePort, searchable_fields: list[str]) -> None:
        self.store = store
        self.searchable_fields = list(searchable_fields)

    def search_documents(
        self,
        filename: str | None = None,
        author: str | None = None,
        content: str | None = None,
        sort_by: str | SortOrder | None = SortOrder.RELEVANCE,
    ) -> list[Document]:
        """Search by specific fields. No filters means no query and no results."""
        clauses = build_search_clauses(filename, author, content)
        if not clauses:
            return []

        sort_order = SortOrder.parse(sort_by)
        logger.debug("Field search with %d clause(s), sort=%s", len(clauses), sort_order.value)
        return self.store.search(clauses, sort_order)

    def search_all_fields(
        self,
        keyword: str | None,
        sort_by: str | SortOrder | None = SortOrder.RELEVANCE,
    ) -> list[Document]:
        """Search the keyword across every configured searchable field."""
        if is_blank(keyword):
            return []
        if not self.searchable_fields:
            raise ConfigurationError("No searchable fields are configured for global search")

        clause = SearchClause(query=keyword, paths=tuple(self.searchable_fields))
        sort_order = SortOrder.parse(sort_by)
        logger.debug(
            "Global search over %d field(s), sort=%s", len(clause.paths), sort_order.value
        )
        return self.store.search([clause], sort_order)

    def get_document_by_id(self, document_id: str) -> Document | None:
        """Look a document up in either collection; ``None`` when absent or malformed."""
        return self.store.get_by_id(document_id)
