"""Validation exceptions for Tariff Search."""

from .base import TariffSearchError


class ValidationError(TariffSearchError):
    """Input validation failed."""

    error_code = "TS_VAL_001"


class MissingSearchCriteriaError(ValidationError):
    """None of filename, author or content was supplied."""

    error_code = "TS_VAL_002"


class EmptyKeywordError(ValidationError):
    """Global search keyword is empty or whitespace only."""

    error_code = "TS_VAL_003"
