"""Request-level failure exceptions for Tariff Search.

Endpoints wrap unexpected failures in these so the caller receives the
underlying message behind a stable prefix.
"""

from .base import TariffSearchError


class SearchFailedError(TariffSearchError):
    """A search request failed for a reason other than validation."""

    error_code = "TS_API_001"


class DownloadFailedError(TariffSearchError):
    """A download request failed for a reason other than a missing document."""

    error_code = "TS_API_002"
