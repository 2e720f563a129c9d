"""Custom exception hierarchy for Tariff Search.

Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from tariff_search.core.domain.exceptions import DocumentNotFoundError
"""

# Base classes
from .base import ExceptionContext, TariffSearchError

# Request failures
from .api import DownloadFailedError, SearchFailedError

# Configuration exceptions
from .configuration import ConfigurationError

# Document lookup exceptions
from .document import DocumentNotFoundError

# Document store exceptions
from .document_store import (
    DocumentStoreConnectionError,
    DocumentStoreError,
    DocumentStoreQueryError,
)

# Rendering exceptions
from .rendering import PdfRenderingError, RenderingError

# Validation exceptions
from .validation import (
    EmptyKeywordError,
    MissingSearchCriteriaError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "TariffSearchError",
    # Configuration
    "ConfigurationError",
    # Document lookup
    "DocumentNotFoundError",
    # Document store
    "DocumentStoreError",
    "DocumentStoreConnectionError",
    "DocumentStoreQueryError",
    # Rendering
    "RenderingError",
    "PdfRenderingError",
    # Validation
    "ValidationError",
    "MissingSearchCriteriaError",
    "EmptyKeywordError",
    # Request failures
    "SearchFailedError",
    "DownloadFailedError",
]
