import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.api.router import api_router
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.session import engine
from app.schemas.search import HealthStatus, ServiceStatus

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    # Startup continues without the store; /search reports faults per request.
    logger.info("Connecting to item store...")
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Item store connection error: %s", exc)
    else:
        logger.info("Connected to item store")
    yield


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    application.state.started_at = time.monotonic()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(api_router)

    @application.get("/", response_model=ServiceStatus, tags=["health"])
    def root() -> ServiceStatus:
        return ServiceStatus(service=settings.service_name)

    @application.get("/health", response_model=HealthStatus, tags=["health"])
    def health_check() -> HealthStatus:
        return HealthStatus(
            service=settings.service_name,
            uptime=time.monotonic() - application.state.started_at,
            timestamp=int(time.time() * 1000),
        )

    return application


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger.info("Search service listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
