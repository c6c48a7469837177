"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
registers the exception handlers and includes all API routers. It serves as
the root of the web server::

    uvicorn querylab.server.main:app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from querylab.core.database import init_db
from querylab.core.logging_config import get_logger, setup_logging

from .api.v1 import health, hello, members, products, teams
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the schema on startup; there is nothing to release on shutdown
    beyond what the engine's pool does itself.
    """
    logger.info("Starting up querylab server...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise

    yield

    logger.info("Shutting down querylab server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    querylab API

    Teams, members, products and a demo record, persisted with SQLModel and
    queried through the typed select() API: filters, ordering, pagination,
    joins, group-by aggregation and DTO projections.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(hello.router, prefix=f"{constant.API_V1_STR}/hello")
app.include_router(teams.router, prefix=f"{constant.API_V1_STR}/teams")
app.include_router(members.router, prefix=f"{constant.API_V1_STR}/members")
app.include_router(products.router, prefix=f"{constant.API_V1_STR}/products")
