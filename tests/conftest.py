"""
Pytest configuration and shared fixtures.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from tariff_search.adapters.outbound.document_store.mongo_adapter import MongoDocumentStore
from tariff_search.core.domain import Document


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: API tests through the FastAPI test client")


class FakeCollection:
    """In-memory stand-in for a pymongo collection.

    ``aggregate`` understands just enough of the search pipeline to be
    useful: ``$search`` keeps every record (scores come from the record's
    ``_score`` key), ``$project`` copies the projected fields,
    ``$unionWith`` appends the other collection's branch, and ``$sort``
    orders by a single key with a stable sort.
    """

    def __init__(self, name: str, records: list[dict[str, Any]], registry: dict[str, "FakeCollection"]):
        self.name = name
        self.records = records
        self.registry = registry
        self.pipelines: list[list[dict[str, Any]]] = []
        self.find_one_calls: list[dict[str, Any]] = []

    def aggregate(self, pipeline: list[dict[str, Any]]):
        self.pipelines.append(pipeline)
        return iter(self._run(pipeline))

    def _run(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        for stage in pipeline:
            (operator, spec), = stage.items()
            if operator == "$search":
                results = [dict(record) for record in self.records]
            elif operator == "$project":
                results = [self._project(record, spec) for record in results]
            elif operator == "$unionWith":
                results = results + self.registry[spec["coll"]]._run(spec["pipeline"])
            elif operator == "$sort":
                (key, direction), = spec.items()
                results = sorted(results, key=lambda r: r.get(key) or 0, reverse=direction < 0)
        return results

    @staticmethod
    def _project(record: dict[str, Any], spec: dict[str, Any]) -> dict[str, Any]:
        projected: dict[str, Any] = {}
        for field, value in spec.items():
            if isinstance(value, dict) and value.get("$meta") == "searchScore":
                projected[field] = record.get("_score", 0.0)
            elif field in record:
                projected[field] = record[field]
        return projected

    def find_one(self, query: dict[str, Any]):
        self.find_one_calls.append(query)
        for record in self.records:
            if record.get("_id") == query.get("_id"):
                return dict(record)
        return None


class FakeDatabase:
    def __init__(self, collections: dict[str, FakeCollection]):
        self.collections = collections

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, [], self.collections)
        return self.collections[name]


class FakeMongoClient:
    """Client exposing one database made of FakeCollections."""

    def __init__(self, primary: list[dict[str, Any]], secondary: list[dict[str, Any]]):
        self.collections: dict[str, FakeCollection] = {}
        self.collections["Documents"] = FakeCollection("Documents", primary, self.collections)
        self.collections[MongoDocumentStore.SECONDARY_COLLECTION] = FakeCollection(
            MongoDocumentStore.SECONDARY_COLLECTION, secondary, self.collections
        )
        self.database = FakeDatabase(self.collections)
        self.admin = MagicMock()
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.database

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def primary_records():
    """Raw records as stored in the primary collection."""
    return [
        {
            "_id": ObjectId("65f000000000000000000001"),
            "FileName": "b-tariff.pdf",
            "Text": "Customs tariff schedule for steel imports.",
            "Author": "Smith",
            "Title": "Steel tariffs",
            "PageCount": 3,
            "_score": 1.5,
        },
        {
            "_id": ObjectId("65f000000000000000000002"),
            "FileName": "a-duties.pdf",
            "Text": "Import duties overview.",
            "Creator": "Word",
            "PageCount": 1,
            "_score": 4.0,
        },
    ]


@pytest.fixture
def secondary_records():
    """Raw records as stored in the secondary collection."""
    return [
        {
            "_id": ObjectId("65f000000000000000000003"),
            "FileName": "c-quotas.pdf",
            "Text": "Quota allocations.",
            "Author": None,
            "PageCount": 2,
            "_score": 2.5,
        },
    ]


@pytest.fixture
def fake_client(primary_records, secondary_records):
    return FakeMongoClient(primary_records, secondary_records)


@pytest.fixture
def store(fake_client):
    """MongoDocumentStore wired to the in-memory client."""
    return MongoDocumentStore(
        connection_string="mongodb://unused",
        database_name="TariffSearch",
        collection_name="Documents",
        client=fake_client,
    )


@pytest.fixture
def sample_document():
    """A fully populated document."""
    return Document(
        id="65f000000000000000000001",
        file_name="Report.pdf",
        text="Customs tariff schedule for steel imports.",
        creator="Word",
        author="Smith",
        title="Steel tariffs",
        subject="Tariffs",
        producer="Acrobat",
        page_count=3,
        score=1.5,
    )
