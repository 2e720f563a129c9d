"""Document search and download endpoints."""

import logging
import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request, Response

from .....core.domain import Document
from .....core.domain.exceptions import (
    DocumentNotFoundError,
    DownloadFailedError,
    EmptyKeywordError,
    MissingSearchCriteriaError,
    SearchFailedError,
)
from .....core.services.download_service import DownloadService
from .....core.services.search_service import SearchService, is_blank
from ..deps import get_download_service, get_search_service
from ..models import ErrorResponse, SearchResultResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])

_HEADER_UNSAFE = re.compile(r"[\x00-\x1f\x7f]")

SEARCH_ERRORS = {
    400: {"model": ErrorResponse, "description": "Missing search criteria"},
    500: {"model": ErrorResponse, "description": "Search failed"},
}


def _base_url(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


def _to_search_results(documents: list[Document], request: Request) -> list[SearchResultResponse]:
    base_url = _base_url(request)
    return [SearchResultResponse.from_document(doc, base_url) for doc in documents]


def _content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and the UTF-8 name.

    Stored file names may contain control characters, CR/LF included, which
    are illegal in a header value; the fallback drops them and the UTF-8
    form percent-encodes every reserved byte.
    """
    fallback = _HEADER_UNSAFE.sub("", filename)
    fallback = fallback.encode("ascii", errors="replace").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.get(
    "/search-with-downloads",
    response_model=list[SearchResultResponse],
    responses=SEARCH_ERRORS,
)
def search_with_downloads(
    request: Request,
    filename: str | None = None,
    author: str | None = None,
    content: str | None = None,
    sort_by: str | None = Query("relevance", alias="sortBy"),
    service: SearchService = Depends(get_search_service),
) -> list[SearchResultResponse]:
    """Search documents by filename, author and/or content.

    Returns:
        Matching documents, each with a download URL.

    Raises:
        MissingSearchCriteriaError: All three filters are blank.
        SearchFailedError: The search could not be executed.
    """
    if is_blank(filename) and is_blank(author) and is_blank(content):
        raise MissingSearchCriteriaError("At least one search parameter is required.")

    try:
        documents = service.search_documents(filename, author, content, sort_by)
    except Exception as e:
        raise SearchFailedError(f"Search error: {e}", cause=e) from e

    return _to_search_results(documents, request)


@router.get(
    "/search-all-with-downloads",
    response_model=list[SearchResultResponse],
    responses=SEARCH_ERRORS,
)
def search_all_with_downloads(
    request: Request,
    keyword: str | None = None,
    sort_by: str | None = Query("relevance", alias="sortBy"),
    service: SearchService = Depends(get_search_service),
) -> list[SearchResultResponse]:
    """Search a keyword across every configured searchable field.

    Raises:
        EmptyKeywordError: The keyword is missing or blank.
        SearchFailedError: The search could not be executed.
    """
    if is_blank(keyword):
        raise EmptyKeywordError("Keyword is required.")

    try:
        documents = service.search_all_fields(keyword, sort_by)
    except Exception as e:
        raise SearchFailedError(f"Search error: {e}", cause=e) from e

    return _to_search_results(documents, request)


@router.get(
    "/download/{document_id}",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "The document as a PDF"},
        404: {"model": ErrorResponse, "description": "Document not found"},
        500: {"model": ErrorResponse, "description": "Download failed"},
    },
)
def download_document(
    document_id: str,
    service: DownloadService = Depends(get_download_service),
) -> Response:
    """Render a document's text as a PDF attachment.

    Raises:
        DocumentNotFoundError: No document has this id, or the id is malformed.
        DownloadFailedError: Lookup or rendering failed.
    """
    try:
        rendered = service.render(document_id)
    except DocumentNotFoundError:
        raise
    except Exception as e:
        raise DownloadFailedError(f"Download error: {e}", cause=e) from e

    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={"Content-Disposition": _content_disposition(rendered.filename)},
    )
