"""Curriculum Ops backend: FastAPI application entry point."""

import uuid
from contextlib import asynccontextmanager

# configure_structlog runs before the app imports below: structlog caches its
# processor chain the first time any module logs.
from curriculum_ops.core.logging import configure_structlog
from curriculum_ops.core.config import get_settings as _get_settings_early

_early_settings = _get_settings_early()
configure_structlog(
    log_level="DEBUG" if _early_settings.debug else _early_settings.log_level,
    json_logs=not _early_settings.debug,
)

import structlog

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from curriculum_ops.api.routes import api_router
from curriculum_ops.core.config import get_settings
from curriculum_ops.core.exceptions import CurriculumOpsError
from curriculum_ops.db.seed import seed_catalog
from curriculum_ops.middleware.correlation import (
    REQUEST_ID_HEADER,
    setup_correlation_middleware,
    get_correlation_id,
)
from curriculum_ops.store import CatalogStore

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler: open the catalog store, seed, close on shutdown."""
    settings = get_settings()
    logger.info("startup_begin", app_name=settings.app_name, debug=settings.debug)

    store: CatalogStore = app.state.store
    await store.init()

    if settings.seed_catalog_on_startup:
        await seed_catalog(store)

    yield

    logger.info("shutdown_begin")
    await store.close()
    logger.info("shutdown_complete")


def _error_response(status_code: int, code: str, message: str, debug_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}, "debug_id": debug_id},
    )


def _log_failure(event: str, request: Request, status_code: int, **fields) -> str:
    """Log a failed request at a level matching its status; return the new debug_id."""
    debug_id = str(uuid.uuid4())
    log = logger.warning if status_code < 500 else logger.error
    log(
        event,
        status_code=status_code,
        debug_id=debug_id,
        correlation_id=get_correlation_id(),
        path=request.url.path,
        method=request.method,
        **fields,
    )
    return debug_id


def _http_error_code(status_code: int) -> str:
    if status_code == 404:
        return "NOT_FOUND"
    return "BAD_REQUEST" if status_code < 500 else "INTERNAL_ERROR"


def _validation_message(errors) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = first.get("msg", "invalid value")
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {msg}" if location else msg


async def curriculum_ops_exception_handler(request: Request, exc: CurriculumOpsError) -> JSONResponse:
    debug_id = _log_failure("request_failed", request, exc.status_code, code=exc.code, error=exc.message)
    return _error_response(exc.status_code, exc.code, exc.message, debug_id)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Framework-raised HTTP errors (unknown route, wrong method) in the same envelope."""
    debug_id = _log_failure("http_exception", request, exc.status_code, detail=exc.detail)
    return _error_response(exc.status_code, _http_error_code(exc.status_code), str(exc.detail), debug_id)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    debug_id = _log_failure("request_validation_failed", request, 400, errors=len(errors))
    return _error_response(400, "BAD_REQUEST", _validation_message(errors), debug_id)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: full traceback in the log, no internals in the response."""
    debug_id = _log_failure(
        "unhandled_exception",
        request,
        500,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )
    return _error_response(500, "INTERNAL_ERROR", "Internal server error", debug_id)


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Catalog store to serve. Built from settings when omitted.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Curriculum operations: provider update impact analysis, review and course synthesis",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.store = store or CatalogStore(settings.database_url, echo=settings.debug)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url, "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # Added last so it wraps CORS and runs first
    setup_correlation_middleware(app)

    # Exception handlers
    app.exception_handler(CurriculumOpsError)(curriculum_ops_exception_handler)
    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(RequestValidationError)(validation_exception_handler)
    app.exception_handler(Exception)(generic_exception_handler)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "curriculum_ops.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
