"""MongoDB Atlas Search document store.

Documents live in two collections that are searched as one: the configured
primary collection and the fixed ``Documents_2`` collection, each with its
own Atlas Search index. A search is a single aggregation on the primary
collection that pulls the secondary collection in with ``$unionWith`` and
sorts the combined stream.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

if TYPE_CHECKING:
    from pymongo import MongoClient
    from pymongo.collection import Collection

from ....core.domain import Document, SearchClause, SortOrder
from ....core.domain.exceptions import DocumentStoreConnectionError, DocumentStoreQueryError
from ....core.ports.document_store_port import DocumentStorePort

logger = logging.getLogger(__name__)

# Raw field name -> Document attribute, for every text field
TEXT_FIELDS = {
    "FileName": "file_name",
    "Text": "text",
    "Creator": "creator",
    "Author": "author",
    "Title": "title",
    "Subject": "subject",
    "Producer": "producer",
}

PROJECTION: dict[str, Any] = {
    "_id": 1,
    **{field: 1 for field in TEXT_FIELDS},
    "PageCount": 1,
    "score": {"$meta": "searchScore"},
}

SORT_STAGES: dict[SortOrder, dict[str, int]] = {
    SortOrder.PAGECOUNT: {"PageCount": pymongo.DESCENDING},
    SortOrder.FILENAME: {"FileName": pymongo.ASCENDING},
    SortOrder.RELEVANCE: {"score": pymongo.DESCENDING},
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def normalize_record(raw: Mapping[str, Any]) -> Document:
    """Map a raw store record to a Document.

    Every field has a default: missing or null text becomes ``""``, a
    missing or unparseable page count becomes ``0``. ObjectIds and other
    non-string scalars are rendered with ``str()``.
    """
    values = {attr: _as_text(raw.get(field)) for field, attr in TEXT_FIELDS.items()}
    return Document(
        id=_as_text(raw.get("_id")),
        page_count=_as_int(raw.get("PageCount")),
        score=_as_float(raw.get("score")),
        **values,
    )


class MongoDocumentStore(DocumentStorePort):
    """Document store backed by two MongoDB collections with Atlas Search indexes."""

    PRIMARY_SEARCH_INDEX = "index01"
    SECONDARY_SEARCH_INDEX = "index02"
    SECONDARY_COLLECTION = "Documents_2"

    def __init__(
        self,
        connection_string: str,
        database_name: str,
        collection_name: str,
        query_timeout: float | None = None,
        client: "MongoClient | None" = None,
    ) -> None:
        """Initialize the store.

        Args:
            connection_string: MongoDB connection URI.
            database_name: Database holding both collections.
            collection_name: Name of the primary collection.
            query_timeout: Seconds allowed per store operation; ``None`` for no limit.
            client: Pre-built client, mainly for tests. Created lazily otherwise.
        """
        self.connection_string = connection_string
        self.database_name = database_name
        self.collection_name = collection_name
        self.query_timeout = query_timeout
        self._client = client

    def _get_client(self) -> "MongoClient":
        """Get or create the shared MongoClient. Thread-safe and pooled."""
        if self._client is None:
            try:
                self._client = pymongo.MongoClient(self.connection_string)
            except PyMongoError as e:
                raise DocumentStoreConnectionError(
                    "Failed to create MongoDB client",
                    cause=e,
                    context={"database": self.database_name},
                ) from e
            logger.info(
                "MongoDB client created for database %s (primary collection %s)",
                self.database_name,
                self.collection_name,
            )
        return self._client

    def _collection(self, name: str) -> "Collection":
        return self._get_client()[self.database_name][name]

    @property
    def primary(self) -> "Collection":
        return self._collection(self.collection_name)

    @property
    def secondary(self) -> "Collection":
        return self._collection(self.SECONDARY_COLLECTION)

    @staticmethod
    def _search_stage(index_name: str, clauses: list[SearchClause]) -> dict[str, Any]:
        return {
            "$search": {
                "index": index_name,
                "compound": {"should": [clause.to_operator() for clause in clauses]},
            }
        }

    def build_pipeline(
        self, clauses: list[SearchClause], sort_order: SortOrder
    ) -> list[dict[str, Any]]:
        """Build the aggregation that searches, unions and sorts both collections.

        The score projection runs inside each branch, next to its ``$search``
        stage, so both halves carry their own relevance score into the sort.
        """
        project = {"$project": PROJECTION}
        return [
            self._search_stage(self.PRIMARY_SEARCH_INDEX, clauses),
            project,
            {
                "$unionWith": {
                    "coll": self.SECONDARY_COLLECTION,
                    "pipeline": [
                        self._search_stage(self.SECONDARY_SEARCH_INDEX, clauses),
                        project,
                    ],
                }
            },
            {"$sort": SORT_STAGES[sort_order]},
        ]

    def search(self, clauses: list[SearchClause], sort_order: SortOrder) -> list[Document]:
        """Run the clauses against both collections as one aggregation.

        Args:
            clauses: Clauses combined with "should" semantics.
            sort_order: Ordering applied after the union.

        Returns:
            Normalized documents in sort order.
        """
        if not clauses:
            return []

        pipeline = self.build_pipeline(clauses, sort_order)
        try:
            with pymongo.timeout(self.query_timeout):
                raw_results = list(self.primary.aggregate(pipeline))
        except PyMongoError as e:
            raise DocumentStoreQueryError(
                "Search aggregation failed",
                cause=e,
                context={
                    "collection": self.collection_name,
                    "clauses": len(clauses),
                    "sort": sort_order.value,
                },
            ) from e

        logger.debug("Search returned %d record(s)", len(raw_results))
        return [normalize_record(raw) for raw in raw_results]

    def get_by_id(self, document_id: str) -> Document | None:
        """Look up a document in the primary collection, then the secondary one.

        Ids that do not parse as an ObjectId are treated as absent.
        """
        try:
            object_id = ObjectId(document_id)
        except (InvalidId, TypeError):
            logger.debug("Rejected malformed document id %r", document_id)
            return None

        query = {"_id": object_id}
        try:
            with pymongo.timeout(self.query_timeout):
                raw = self.primary.find_one(query)
                if raw is None:
                    raw = self.secondary.find_one(query)
        except PyMongoError as e:
            raise DocumentStoreQueryError(
                "Document lookup failed",
                cause=e,
                context={"document_id": document_id},
            ) from e

        if raw is None:
            return None
        return normalize_record(raw)

    def ping(self) -> bool:
        """Return True if the deployment answers a ping."""
        try:
            with pymongo.timeout(self.query_timeout):
                self._get_client().admin.command("ping")
        except (PyMongoError, DocumentStoreConnectionError) as e:
            logger.warning("MongoDB ping failed: %s", e)
            return False
        return True

    def close(self) -> None:
        """Close the client and its connection pool."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")
