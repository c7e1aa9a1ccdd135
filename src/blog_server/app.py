import logging
import traceback
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from blog_server.database import create_session_maker, get_session
from blog_server.migrations import upgrade_database
from blog_server.router import router
from blog_server.settings import Settings

logger = logging.getLogger("blog_server")

STATIC_PATH = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = Settings()
    app.state.settings = settings

    try:
        upgrade_database(settings)
        app.state.engine, app.state.db_session_maker = create_session_maker(settings.database_url)
        app.state.get_db_session = lambda read_only=False: get_session(app.state.db_session_maker, read_only)
    except Exception as e:
        logger.warning(f"Failed to create database session: {e}")
        raise

    logger.info(f"Serving blog from {settings.database_path}")

    yield

    await app.state.engine.dispose()
    logger.info("Application shutdown completed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Blog",
        description="Read-only blog of authors and their posts",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, e: HTTPException) -> JSONResponse:
        logger.error(f"HTTP {e.status_code}: {e.detail} - {request.method} {request.url}")
        return JSONResponse(
            status_code=e.status_code,
            content={"detail": e.detail},
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, e: ValidationError) -> JSONResponse:
        logger.error(f"Validation error on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": e.errors()},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, e: ValueError) -> JSONResponse:
        logger.error(f"ValueError on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=400,
            content={"detail": str(e)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, e: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url}:")
        logger.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(e)},
        )

    app.mount("/static", StaticFiles(directory=str(STATIC_PATH)), name="static")
    app.include_router(router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
