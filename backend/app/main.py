import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.routing import APIRoute
from starlette.middleware.cors import CORSMiddleware

from app.api.main import api_router
from app.core.config import settings
from app.core.db import Database, init_db
from app.core.errors import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_logger = logging.getLogger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
    sentry_sdk.init(dsn=str(settings.SENTRY_DSN), traces_sample_rate=1.0)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup is fatal when the store can't be reached.
    database: Database | None = app.state.database
    if database is None:
        database = Database.from_settings(settings)
        app.state.database = database
    init_db(database)
    try:
        yield
    finally:
        database.dispose()
        _logger.info("Store connections closed")


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the application around an explicitly supplied store handle.

    With no ``database`` the handle is built from settings at startup.
    """
    application = FastAPI(
        title=settings.PROJECT_NAME,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )
    application.state.database = database

    register_exception_handlers(application)

    # Set all CORS enabled origins
    if settings.all_cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    application.include_router(api_router)
    return application


app = create_app()
