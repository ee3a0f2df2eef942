# =============================================================================
# lib/ - Client Factories
# =============================================================================
# - database.py: async SQLAlchemy engine with a bounded MySQL pool
# - s3_client.py: boto3 S3 client with static credentials
# =============================================================================

from lib.database import create_engine
from lib.s3_client import create_s3_client

__all__ = [
    "create_engine",
    "create_s3_client",
]
