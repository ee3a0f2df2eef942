# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the process-wide services.
# create_app() stores them on app.state; route handlers receive them
# through Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.asset_service import AssetLinkService
from core.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """Return the ProductService bound to this app."""
    return request.app.state.product_service


def get_asset_service(request: Request) -> AssetLinkService:
    """Return the AssetLinkService bound to this app."""
    return request.app.state.asset_service


# Type aliases for dependency injection
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
AssetServiceDep = Annotated[AssetLinkService, Depends(get_asset_service)]
