"""Document store exceptions for Tariff Search."""

from .base import TariffSearchError


class DocumentStoreError(TariffSearchError):
    """Base error for document store operations."""

    error_code = "TS_STO_001"


class DocumentStoreConnectionError(DocumentStoreError):
    """Failed to reach the MongoDB deployment.

    Common causes:
    - Invalid connection string or credentials
    - Network connectivity issues
    - Server selection timed out
    """

    error_code = "TS_STO_002"


class DocumentStoreQueryError(DocumentStoreError):
    """A search aggregation or lookup failed.

    Common causes:
    - Atlas Search index does not exist on the collection
    - Operation exceeded the configured timeout
    """

    error_code = "TS_STO_003"
