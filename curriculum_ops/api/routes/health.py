import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text

from curriculum_ops.api.deps import get_store
from curriculum_ops.store import CatalogStore

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "curriculum-ops"}


@router.get("/ready")
async def readiness_check(store: CatalogStore = Depends(get_store)):
    """Readiness check - verifies the catalog store answers queries."""
    checks = {"database": False}

    try:
        async with store.session_factory() as session:
            await session.execute(text("SELECT 1"))
        checks["database"] = True
    except Exception as e:
        logger.error("readiness_database_failed", error=str(e), error_type=type(e).__name__)

    all_healthy = all(checks.values())
    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content={"status": "ready" if all_healthy else "degraded", "checks": checks},
    )
