# =============================================================================
# core/models/asset.py - Signed URL Schema
# =============================================================================
# A presigned URL is issued fresh on every request and never stored.
# It carries its own issuance time so callers can reason about expiry.
# =============================================================================

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

# Validity window for every presigned URL (seconds)
SIGNED_URL_EXPIRES_IN = 3600


class SignedUrl(BaseModel):
    """
    Time-limited retrieval URL for one object in the bucket.

    Anyone holding `url` can GET the object until `expires_at`.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Presigned GET URL")

    bucket: str = Field(..., description="Bucket the object lives in")

    key: str = Field(..., description="Object key inside the bucket")

    expires_in: int = Field(
        default=SIGNED_URL_EXPIRES_IN,
        gt=0,
        description="Validity window in seconds"
    )

    issued_at: datetime = Field(..., description="UTC time the URL was signed")

    @property
    def expires_at(self) -> datetime:
        """Moment the URL stops working."""
        return self.issued_at + timedelta(seconds=self.expires_in)

    def __str__(self) -> str:
        return self.url
