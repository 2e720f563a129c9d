"""PDF rendering exceptions for Tariff Search."""

from .base import TariffSearchError


class RenderingError(TariffSearchError):
    """Base error for document rendering."""

    error_code = "TS_PDF_001"


class PdfRenderingError(RenderingError):
    """reportlab failed to lay out or write the PDF."""

    error_code = "TS_PDF_002"
