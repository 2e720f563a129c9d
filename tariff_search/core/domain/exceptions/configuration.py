"""Configuration-related exceptions for Tariff Search."""

from .base import TariffSearchError


class ConfigurationError(TariffSearchError):
    """Configuration or environment variable errors.

    Raised when required configuration is missing or invalid.
    """

    error_code = "TS_CFG_001"
