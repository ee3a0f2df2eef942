# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the logic behind the page:
# - models/: products table mapping, ProductRecord and SignedUrl schemas
# - services/: product queries and presigned asset links
#
# Services receive their engine / S3 client from the caller, so they can
# be tested with local stand-ins.
# =============================================================================
