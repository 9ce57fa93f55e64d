"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import aliens
from app.core.config import settings
from app.core.constants import AppEnv
from app.core.errors import StorageError
from app.core.logging import get_logger, setup_logging
from app.db.session import create_tables, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(
        settings.log_level,
        json_logs=settings.LOG_JSON,
        cache_loggers=(settings.APP_ENV == AppEnv.PRODUCTION),
    )
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)
    if settings.DB_CREATE_TABLES:
        await create_tables()
        logger.info("Database tables ensured")
    yield
    await engine.dispose()
    logger.info("Application shutting down")


app = FastAPI(
    title="Aliens API",
    description="CRUD endpoints over the aliens table",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(aliens.router, prefix=settings.API_PREFIX)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Log storage failures with context and answer a generic 500."""
    get_logger("api.errors").error(
        "Storage failure",
        path=request.url.path,
        method=request.method,
        operation=exc.operation,
        alien_id=exc.alien_id,
        **exc.details,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
