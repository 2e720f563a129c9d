"""FastAPI dependency providers.

The document store holds the process-wide MongoClient, so every provider is
cached and the same instances serve all requests.
"""

import logging
from functools import lru_cache

from ....adapters.outbound.document_store.mongo_adapter import MongoDocumentStore
from ....adapters.outbound.pdf.reportlab_renderer import ReportLabPdfRenderer
from ....config.settings import settings
from ....core.services.download_service import DownloadService
from ....core.services.search_service import SearchService

logger = logging.getLogger(__name__)


@lru_cache
def get_document_store() -> MongoDocumentStore:
    """Get or create the MongoDocumentStore singleton."""
    logger.info("Initializing MongoDocumentStore...")
    return MongoDocumentStore(
        connection_string=settings.mongo_connection_string,
        database_name=settings.mongo_database_name,
        collection_name=settings.mongo_collection_name,
        query_timeout=settings.mongo_query_timeout_seconds,
    )


@lru_cache
def get_pdf_renderer() -> ReportLabPdfRenderer:
    """Get or create the ReportLabPdfRenderer singleton."""
    return ReportLabPdfRenderer()


@lru_cache
def get_search_service() -> SearchService:
    """Get or create the SearchService singleton."""
    logger.info("Initializing SearchService...")
    return SearchService(get_document_store(), settings.searchable_fields)


@lru_cache
def get_download_service() -> DownloadService:
    """Get or create the DownloadService singleton."""
    return DownloadService(get_search_service(), get_pdf_renderer())


def close_document_store() -> None:
    """Close the shared store if it was ever created."""
    if get_document_store.cache_info().currsize:
        get_document_store().close()
    get_download_service.cache_clear()
    get_search_service.cache_clear()
    get_document_store.cache_clear()
