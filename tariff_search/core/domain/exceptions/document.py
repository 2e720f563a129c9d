"""Document lookup exceptions for Tariff Search."""

from .base import TariffSearchError


class DocumentNotFoundError(TariffSearchError):
    """No document with the requested id exists in either collection.

    Raised both for ids that are well-formed but absent and for ids that
    cannot be parsed as an ObjectId.
    """

    error_code = "TS_DOC_001"

    def __init__(self, document_id: str, message: str = "Document not found.") -> None:
        super().__init__(message, context={"document_id": document_id})
        self.document_id = document_id
