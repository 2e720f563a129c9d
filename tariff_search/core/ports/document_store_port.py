"""Document Store Port Interface."""

from abc import ABC, abstractmethod

from ..domain import Document, SearchClause, SortOrder


class DocumentStorePort(ABC):
    """Abstract interface for the searchable document store.

    Implementations hold both document collections and present them as one
    logical set: callers never learn which collection a record came from.
    """

    @abstractmethod
    def search(self, clauses: list[SearchClause], sort_order: SortOrder) -> list[Document]:
        """Run the clauses with "should" semantics over both collections."""
        ...

    @abstractmethod
    def get_by_id(self, document_id: str) -> Document | None:
        """Fetch a document by id from either collection."""
        ...

    @abstractmethod
    def ping(self) -> bool:
        """Check that the store is reachable."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release pooled connections."""
        ...
