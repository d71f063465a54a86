"""Catalog API — FastAPI application entry point.

Invariants:
    - Routers registered explicitly (no auto-discovery)
    - Global error handlers turn CatalogError into structured JSON responses
    - CORS origins come from settings
    - Startup order: logging → database → optional create_all → optional
      default-category seeding; the engine is disposed on shutdown

Design Decisions:
    - Lifespan context manager over @app.on_event
    - create_all is a development convenience; Alembic owns the schema in
      production (CREATE_TABLES_ON_STARTUP=false)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import auth, categories, health, products
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import log_requests, setup_logging
from app.infrastructure.repositories import SqlCategoryRepository
from app.services.category_service import seed_default_categories

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_tables_on_startup:
        await manager.create_all()
    if settings.seed_default_categories:
        async with manager.session() as db:
            await seed_default_categories(SqlCategoryRepository(db))
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    await manager.dispose()
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title="Catalog API", version=settings.app_version, lifespan=lifespan,
)

if settings.log_requests:
    app.middleware("http")(log_requests)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(products.router)

register_error_handlers(app)
