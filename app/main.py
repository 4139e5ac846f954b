"""FastAPI application entrypoint. No business logic; only wiring, lifecycle and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import Database

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

# Validation error fields that can carry the submitted value (e.g. a password).
REDACTED_ERROR_KEYS = frozenset({"input", "ctx", "url"})


def write_openapi(app: FastAPI, path: str) -> None:
    """Write the generated OpenAPI document to path as JSON."""
    Path(path).write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    logger.info("OpenAPI document written to %s", path)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database handle at startup and dispose it at shutdown. Startup failures are fatal."""
    if getattr(app.state, "database", None) is None:
        app.state.database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    database: Database = app.state.database

    if not database.check_connected():
        database.dispose()
        raise RuntimeError("Database is not reachable; check DATABASE_URL")
    logger.info("Database connection verified")

    if settings.OPENAPI_OUTPUT_PATH:
        try:
            write_openapi(app, settings.OPENAPI_OUTPUT_PATH)
        except OSError:
            database.dispose()
            logger.exception("Could not write OpenAPI document")
            raise

    try:
        yield
    finally:
        database.dispose()
        logger.info("Database connections closed")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400, without echoing submitted values."""
    errors = [
        {key: value for key, value in error.items() if key not in REDACTED_ERROR_KEYS}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report data-layer faults as 500; includes the raw error text when EXPOSE_DB_ERRORS is set."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    error = str(exc) if settings.EXPOSE_DB_ERRORS else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": error},
    )


def create_app(database: Database | None = None) -> FastAPI:
    """Build the application. Pass a Database to use it instead of one built from DATABASE_URL."""
    app = FastAPI(
        title="Coffee Beans API",
        version="1.0.0",
        description="Coffee bean catalog with per-user beans and bearer-token authentication.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    app.include_router(v1_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Coffee Beans API"}

    return app


app = create_app()
