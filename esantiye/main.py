import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from esantiye.core.config import settings
from esantiye.core.db import Database
from esantiye.core.errors import EsantiyeError
from esantiye.core.log import configure_logging
from esantiye.routers import resources, stats
from esantiye.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    database: Database = app.state.database
    try:
        database.connect()
        database.init_schema()
    except EsantiyeError:
        # Never serve requests against an unready store.
        logger.critical("server could not start: database unavailable")
        raise
    yield


async def handle_esantiye_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = getattr(exc, "status_code", 500)
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def create_app(database: Database | None = None) -> FastAPI:
    if database is None:
        database = Database(
            settings.sqlalchemy_url,
            sqlite_foreign_keys=settings.sqlite_foreign_keys,
        )

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(EsantiyeError, handle_esantiye_error)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    # Must answer even when the database is down.
    @app.get(f"{settings.api_prefix}/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    # Register routers
    for router in resources.routers:
        app.include_router(router, prefix=settings.api_prefix)
    app.include_router(stats.router, prefix=settings.api_prefix)

    return app


configure_logging(settings.log_level)
app = create_app()
