"""FastAPI application for the Tariff Search API."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import TariffSearchError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .deps import close_document_store
from .routers import documents, health

setup_logging(level=settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

# Stack traces are only included in error bodies when DEBUG=true
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

app = FastAPI(
    title="Tariff Search API",
    description=(
        "Fuzzy search over indexed tariff documents by filename, author, content "
        "or keyword, with every hit downloadable as a PDF."
    ),
    version=__version__,
)

app.include_router(health.router)
app.include_router(documents.router)


def _error_response(request: Request, exc: Exception) -> JSONResponse:
    status_code = get_http_status_code(exc)
    # Client errors are expected traffic, not incidents
    log_exception(
        exc,
        log=logger,
        level=logging.ERROR if status_code >= 500 else logging.INFO,
        extra_context={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status_code,
        content=format_exception_json(exc, include_trace=DEBUG_MODE),
    )


@app.exception_handler(TariffSearchError)
async def tariff_search_error_handler(request: Request, exc: TariffSearchError) -> JSONResponse:
    """Structured body with the error's own code and status."""
    return _error_response(request, exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything that escaped the routers becomes a 500 with ``PYTHON_ERR``."""
    return _error_response(request, exc)


@app.on_event("startup")
async def startup_event():
    logger.info(
        "Tariff Search API %s starting: database %s, primary collection %s",
        __version__,
        settings.mongo_database_name,
        settings.mongo_collection_name,
    )
    if DEBUG_MODE:
        logger.warning("Debug mode enabled: error responses include stack traces")


@app.on_event("shutdown")
async def shutdown_event():
    """Release the MongoDB connection pool."""
    logger.info("Tariff Search API shutting down")
    close_document_store()


__all__ = ["app"]
