"""Use-case service for downloading a document as a PDF."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..domain.exceptions import DocumentNotFoundError
from ..ports.pdf_renderer_port import PdfRendererPort
from .search_service import SearchService

logger = logging.getLogger(__name__)

_PDF_EXTENSION = re.compile(re.escape(".pdf"), re.IGNORECASE)


def build_download_filename(original_file_name: str | None, document_id: str) -> str:
    """Name for the generated PDF.

    ``Report.pdf`` becomes ``Report-content.pdf``; every ``.pdf`` in the
    original name is removed regardless of case. Without an original name
    the id is used: ``document-<id>.pdf``.
    """
    if original_file_name:
        return _PDF_EXTENSION.sub("", original_file_name) + "-content.pdf"
    return f"document-{document_id}.pdf"


@dataclass
class RenderedDocument:
    """A generated PDF ready to be sent to the caller."""

    filename: str
    content: bytes
    media_type: str = "application/pdf"


class DownloadService:
    """Looks a document up in the store and renders it to PDF."""

    def __init__(self, search_service: SearchService, renderer: PdfRendererPort) -> None:
        self.search_service = search_service
        self.renderer = renderer

    def render(self, document_id: str) -> RenderedDocument:
        """Render the document with the given id.

        Raises:
            DocumentNotFoundError: The id is malformed or matches no document.
        """
        document = self.search_service.get_document_by_id(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        content = self.renderer.render(document.file_name, document.text)
        filename = build_download_filename(document.file_name, document_id)
        logger.info("Rendered document %s as %s (%d bytes)", document_id, filename, len(content))
        return RenderedDocument(filename=filename, content=content)
