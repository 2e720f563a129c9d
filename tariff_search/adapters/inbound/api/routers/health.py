"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ....outbound.document_store.mongo_adapter import MongoDocumentStore
from ..deps import get_document_store
from ..models import HealthResponse
from ..... import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check. Does not touch the document store."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        document_store="not_checked",
    )


@router.get("/ready", response_model=HealthResponse)
def readiness_check(store: MongoDocumentStore = Depends(get_document_store)) -> HealthResponse:
    """Readiness probe. Pings the document store."""
    reachable = store.ping()
    return HealthResponse(
        status="ready" if reachable else "degraded",
        version=__version__,
        document_store="connected" if reachable else "unreachable",
    )
