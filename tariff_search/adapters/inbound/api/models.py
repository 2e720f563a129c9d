"""Pydantic models for API responses."""

from pydantic import BaseModel, ConfigDict, Field

from ....core.domain import Document


class SearchResultResponse(BaseModel):
    """A search hit as exposed to API callers.

    Full text and relevance score stay internal.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Document id")
    file_name: str = Field(..., alias="fileName", description="Original file name")
    author: str = Field("", description="Author metadata")
    title: str = Field("", description="Title metadata")
    page_count: int = Field(0, alias="pageCount", description="Number of pages")
    download_url: str = Field(
        ...,
        alias="downloadUrl",
        description="Absolute URL that returns the document as a PDF",
        json_schema_extra={"example": "https://host/api/documents/download/65f0c0ffee0000000000abcd"},
    )

    @classmethod
    def from_document(cls, document: Document, base_url: str) -> "SearchResultResponse":
        return cls(
            id=document.id,
            file_name=document.file_name,
            author=document.author,
            title=document.title,
            page_count=document.page_count,
            download_url=f"{base_url}/api/documents/download/{document.id}",
        )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    document_store: str = Field(..., description="Document store status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., TS_VAL_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "DocumentNotFoundError", "code": "TS_DOC_001", "message": "..."},
            "location": {"class": "DownloadService", "method": "render", ...},
            "context": {"document_id": "..."},
            "stack_trace": ["Traceback...", ...]  # Only in debug mode
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    location: ErrorLocation | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
