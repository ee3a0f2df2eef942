# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .asset_service import AssetLinkService
from .product_service import ProductService

__all__ = [
    "AssetLinkService",
    "ProductService",
]
