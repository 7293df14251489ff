"""Practice API — FastAPI application factory and the two service apps.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Each app owns exactly one store; the two services share nothing
    - Global error handlers map PracticeApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store initialized on startup via lifespan context manager

Design Decisions:
    - One factory, two module-level apps (products_app, users_app): the
      services stay independent processes but reuse the same plumbing
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from practice_api.api.error_handlers import register_error_handlers
from practice_api.api.routes import health, home, products, users
from practice_api.config import get_settings
from practice_api.core.domain_types import ServiceName
from practice_api.infrastructure.memory_store import init_store, close_store
from practice_api.infrastructure.observability import setup_logging
from practice_api.infrastructure.request_logging import RequestLoggingMiddleware
from practice_api.schemas.product import PRODUCT_EXAMPLE
from practice_api.schemas.user import USER_EXAMPLE

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

_TITLES = {
    ServiceName.PRODUCTS: "Product API",
    ServiceName.USERS: "User API",
}
_EXAMPLES = {
    ServiceName.PRODUCTS: PRODUCT_EXAMPLE,
    ServiceName.USERS: USER_EXAMPLE,
}


def _lifespan_for(service: ServiceName):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        settings = get_settings()
        setup_logging(settings.log_level, settings.log_format)
        init_store(service, seed=settings.seed_data)
        logger.info(
            f"{_TITLES[service]} started on http://{settings.host}:{settings.port}",
            extra={"service": service.value},
        )
        yield
        close_store(service)
        logger.info(
            f"{_TITLES[service]} shutting down", extra={"service": service.value},
        )

    return lifespan


def create_app(service: ServiceName) -> FastAPI:
    """Build the ASGI app for one service."""
    app = FastAPI(
        title=_TITLES[service], version=VERSION, lifespan=_lifespan_for(service),
    )
    app.state.service = service
    app.state.payload_example = _EXAMPLES[service]

    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    if service is ServiceName.PRODUCTS:
        app.include_router(home.products_home_router)
        app.include_router(products.router)
    else:
        app.include_router(home.users_home_router)
        app.include_router(users.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


products_app = create_app(ServiceName.PRODUCTS)
users_app = create_app(ServiceName.USERS)
