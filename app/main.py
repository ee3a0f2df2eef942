# =============================================================================
# app/main.py - FastAPI Application Factory
# =============================================================================
# Builds the FastAPI application from explicitly constructed services,
# mounts static files, registers exception handlers and routers.
#
# Usage:
#   showcase-server                       (validates config, then serves)
#   uvicorn app.main:create_app --factory (skips the fail-fast exit)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.exceptions import (
    ShowcaseException,
    showcase_exception_handler,
    unexpected_exception_handler,
)
from app.routers import home
from app.templating import STATIC_DIR
from core.services.asset_service import AssetLinkService
from core.services.product_service import ProductService
from lib.database import create_engine

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: nothing to open, the pool connects lazily
    - Shutdown: runs after uvicorn has drained in-flight requests,
      then closes the connection pool
    """
    logger.info("Starting product showcase")

    yield

    logger.info("Shutting down server...")
    await app.state.product_service.close()


def create_app(
    settings: Settings | None = None,
    product_service: ProductService | None = None,
    asset_service: AssetLinkService | None = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Services not passed in are built from settings.

    Args:
        settings: Validated settings (loaded from the environment if omitted)
        product_service: Products reader
        asset_service: Presigned URL issuer

    Returns:
        FastAPI: Configured application
    """
    if product_service is None or asset_service is None:
        settings = settings or get_settings()

    if product_service is None:
        engine = create_engine(
            settings.database_url,
            pool_size=settings.DB_CONNECTION_LIMIT,
            echo=settings.DEBUG,
        )
        product_service = ProductService(engine)

    if asset_service is None:
        asset_service = AssetLinkService.from_settings(settings)

    app = FastAPI(
        title="Product Showcase",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.product_service = product_service
    app.state.asset_service = asset_service

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ShowcaseException, showcase_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routes
    # =========================================================================

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(home.router, tags=["Products"])

    return app
