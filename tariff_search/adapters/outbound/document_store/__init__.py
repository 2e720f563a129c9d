"""Document store adapters."""

from .mongo_adapter import MongoDocumentStore, normalize_record

__all__ = ["MongoDocumentStore", "normalize_record"]
