# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_config.py: settings loading and fail-fast startup
# - test_models.py: ProductRecord and SignedUrl
# - test_product_service.py: products query against SQLite (aiosqlite)
# - test_asset_service.py: presigned URLs with boto3
# - test_home.py: GET / and /static over HTTP
#
# Run tests with: pytest
# =============================================================================
