# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains the schemas the server works with:
# - product.py: products table mapping and the ProductRecord read model
# - asset.py: SignedUrl for the banner image
# =============================================================================

from .asset import SIGNED_URL_EXPIRES_IN, SignedUrl
from .product import Base, Product, ProductRecord

__all__ = [
    "SIGNED_URL_EXPIRES_IN",
    "SignedUrl",
    "Base",
    "Product",
    "ProductRecord",
]
