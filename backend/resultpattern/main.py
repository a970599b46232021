"""Result Pattern Demo API: FastAPI application factory and module-level app.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Each app instance owns its own store and services (app.state.container)
    - Global error handlers render every failure as a problem document
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app(settings, store) factory: tests build isolated apps without touching
      the cached settings or another test's data
    - Container built at creation, not in lifespan: ASGI test transports skip lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resultpattern.api.error_handlers import register_error_handlers
from resultpattern.api.routes import demo, health, info, orders, products, users
from resultpattern.config import Settings, get_settings
from resultpattern.infrastructure.memory_store import InMemoryStore
from resultpattern.infrastructure.observability import setup_logging
from resultpattern.services.container import build_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger.info(f"{app.title} {app.version} started")
    yield
    logger.info(f"{app.title} shutting down")


def create_app(
    settings: Settings | None = None, store: InMemoryStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_title, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = build_container(settings, store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(info.router)
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(demo.router)

    register_error_handlers(app)
    return app


app = create_app()
