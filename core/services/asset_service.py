# =============================================================================
# core/services/asset_service.py - Presigned Asset Links
# =============================================================================
# Issues time-limited GET URLs for objects in the S3 bucket.
#
# Presigning is a local computation: the signature is derived from the
# credentials, so no request reaches S3 here. Bad credentials or a missing
# object only show up when the browser follows the URL.
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from app.exceptions import AssetLinkError
from core.models.asset import SIGNED_URL_EXPIRES_IN, SignedUrl
from lib.s3_client import create_s3_client

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


class AssetLinkService:
    """
    Service for issuing presigned object URLs.

    The S3 client is built on first use and reused for the life of the
    process. URLs are never reused: every call signs a new one.

    Example:
        service = AssetLinkService.from_settings(settings)
        link = await service.issue_url()
        print(link.url)
    """

    def __init__(
        self,
        client_factory: Callable[[], BaseClient],
        bucket: str,
        key: str,
        expires_in: int = SIGNED_URL_EXPIRES_IN,
    ):
        self._client_factory = client_factory
        self._client: BaseClient | None = None
        self.bucket = bucket
        self.key = key
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> AssetLinkService:
        """Build the service from validated settings."""
        return cls(
            client_factory=lambda: create_s3_client(
                settings.AWS_ACCESS_KEY_ID,
                settings.AWS_SECRET_ACCESS_KEY,
                settings.AWS_REGION,
            ),
            bucket=settings.S3_BUCKET_NAME,
            key=settings.BANNER_OBJECT_KEY,
        )

    def _get_client(self) -> BaseClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def issue_url(self, key: str | None = None) -> SignedUrl:
        """
        Sign a GET URL for one object.

        Args:
            key: Object key (defaults to the configured banner key)

        Returns:
            SignedUrl valid for `expires_in` seconds from now

        Raises:
            AssetLinkError: If the client cannot be built or signing fails
        """
        key = key or self.key
        issued_at = datetime.now(timezone.utc)

        try:
            url = self._get_client().generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=self.expires_in,
            )

        except (BotoCoreError, ClientError, ValueError) as e:
            logger.exception(f"Error fetching static file from S3: {e}")
            raise AssetLinkError(key, str(e)) from e

        logger.debug(f"Signed URL issued for s3://{self.bucket}/{key}")
        return SignedUrl(
            url=url,
            bucket=self.bucket,
            key=key,
            expires_in=self.expires_in,
            issued_at=issued_at,
        )
