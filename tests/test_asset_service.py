# =============================================================================
# tests/test_asset_service.py - AssetLinkService Tests
# =============================================================================
# Presigning is local, so these tests use a real boto3 client with dummy
# credentials. No request leaves the machine.
# =============================================================================

import asyncio
from datetime import datetime, timezone
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest
from botocore.exceptions import ClientError, InvalidRegionError, NoCredentialsError

from app.config import load_settings
from app.exceptions import AssetLinkError
from core.services import AssetLinkService
from lib.s3_client import create_s3_client


def _real_service(**kwargs) -> AssetLinkService:
    return AssetLinkService(
        client_factory=lambda: create_s3_client("AKIDEXAMPLE", "secret-example", "us-east-1"),
        bucket="test-bucket",
        key="banner.jpg",
        **kwargs,
    )


# =============================================================================
# Presigned URL Tests
# =============================================================================

class TestIssueUrl:
    """Test presigned URL generation."""

    def test_url_expires_in_one_hour(self):
        """Test the URL encodes a 3600 second window."""
        link = asyncio.run(_real_service().issue_url())
        query = parse_qs(urlparse(link.url).query)

        assert query["X-Amz-Expires"] == ["3600"]
        assert link.expires_in == 3600

    def test_url_carries_issuance_time(self):
        """Test X-Amz-Date matches the recorded issuance time."""
        before = datetime.now(timezone.utc).replace(microsecond=0)
        link = asyncio.run(_real_service().issue_url())
        after = datetime.now(timezone.utc)

        query = parse_qs(urlparse(link.url).query)
        signed_at = datetime.strptime(query["X-Amz-Date"][0], "%Y%m%dT%H%M%SZ").replace(tzinfo=timezone.utc)

        assert before <= signed_at <= after
        assert before <= link.issued_at <= after

    def test_url_targets_bucket_and_key(self):
        """Test the URL points at the configured object."""
        link = asyncio.run(_real_service().issue_url())
        parsed = urlparse(link.url)

        assert "test-bucket" in parsed.netloc + parsed.path
        assert parsed.path.endswith("/banner.jpg")
        assert "X-Amz-Signature" in parse_qs(parsed.query)
        assert link.key == "banner.jpg"
        assert link.bucket == "test-bucket"

    def test_explicit_key(self):
        """Test a different key can be signed on demand."""
        link = asyncio.run(_real_service().issue_url("promo/summer.png"))

        assert urlparse(link.url).path.endswith("/promo/summer.png")
        assert link.key == "promo/summer.png"

    def test_every_call_signs_again(self):
        """Test URLs are not cached between calls."""
        client = MagicMock()
        client.generate_presigned_url.side_effect = ["https://s3/a?sig=1", "https://s3/a?sig=2"]
        service = AssetLinkService(lambda: client, bucket="b", key="banner.jpg")

        async def scenario():
            return await service.issue_url(), await service.issue_url()

        first, second = asyncio.run(scenario())

        assert client.generate_presigned_url.call_count == 2
        assert first.url != second.url
        assert first.issued_at <= second.issued_at
        client.generate_presigned_url.assert_called_with(
            "get_object",
            Params={"Bucket": "b", "Key": "banner.jpg"},
            ExpiresIn=3600,
        )

    def test_client_built_once(self):
        """Test the S3 client is created lazily and reused."""
        factory = MagicMock()
        factory.return_value.generate_presigned_url.return_value = "https://s3/a"
        service = AssetLinkService(factory, bucket="b", key="k")

        async def scenario():
            await service.issue_url()
            await service.issue_url()

        asyncio.run(scenario())

        factory.assert_called_once()

    def test_from_settings(self):
        """Test the service picks up bucket and key from settings."""
        service = AssetLinkService.from_settings(load_settings(env_file=None))

        assert service.bucket == "test-bucket"
        assert service.key == "banner.jpg"
        assert service.expires_in == 3600


# =============================================================================
# Failure Tests
# =============================================================================

class TestIssueUrlFailures:
    """Test that signing failures become AssetLinkError."""

    @pytest.mark.parametrize(
        "error",
        [
            NoCredentialsError(),
            InvalidRegionError(region_name="not a region"),
            ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GetObject"),
        ],
    )
    def test_signing_error(self, error):
        """Test boto errors are wrapped with a generic public message."""
        client = MagicMock()
        client.generate_presigned_url.side_effect = error
        service = AssetLinkService(lambda: client, bucket="b", key="banner.jpg")

        with pytest.raises(AssetLinkError) as exc_info:
            asyncio.run(service.issue_url())

        assert exc_info.value.message == "S3 error"
        assert exc_info.value.details["key"] == "banner.jpg"

    def test_client_construction_error(self):
        """Test an invalid region surfaces when the client is first needed."""
        service = AssetLinkService(
            client_factory=lambda: create_s3_client("AKIDEXAMPLE", "secret", "not a region!"),
            bucket="b",
            key="banner.jpg",
        )

        with pytest.raises(AssetLinkError):
            asyncio.run(service.issue_url())
