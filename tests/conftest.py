# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up fake environment variables before any imports
# - Provides stand-in services so HTTP tests need no MySQL or S3
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_USER", "shop")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("DB_NAME", "shop")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "AKIDEXAMPLE")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("S3_BUCKET_NAME", "test-bucket")

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.models import ProductRecord, SignedUrl
from core.services import AssetLinkService, ProductService

REQUIRED_ENV = (
    "DB_HOST",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_REGION",
    "S3_BUCKET_NAME",
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_products():
    """Three products as the database would return them."""
    return [
        ProductRecord(id=1, name="Desk Lamp", description="Adjustable arm", price=Decimal("24.5")),
        ProductRecord(id=2, name="Notebook", description=None, price=Decimal("3")),
        ProductRecord(id=3, name="Fountain Pen", description="Steel nib", price=Decimal("119.99")),
    ]


def make_signed_url(url: str = "https://test-bucket.s3.amazonaws.com/banner.jpg?X-Amz-Expires=3600") -> SignedUrl:
    return SignedUrl(
        url=url,
        bucket="test-bucket",
        key="banner.jpg",
        issued_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def product_service(sample_products):
    """ProductService stand-in returning sample_products."""
    service = MagicMock(spec=ProductService)
    service.list_products = AsyncMock(return_value=sample_products)
    service.close = AsyncMock()
    return service


@pytest.fixture
def asset_service():
    """AssetLinkService stand-in returning a fixed URL."""
    service = MagicMock(spec=AssetLinkService)
    service.issue_url = AsyncMock(return_value=make_signed_url())
    return service


@pytest.fixture
def client(product_service, asset_service):
    """TestClient for an app wired to the stand-in services."""
    app = create_app(product_service=product_service, asset_service=asset_service)
    return TestClient(app)
