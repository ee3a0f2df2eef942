# =============================================================================
# lib/s3_client.py - S3 Client Factory
# =============================================================================
# Creates the boto3 S3 client used to presign object URLs.
# Credentials are passed explicitly so nothing is read from ~/.aws.
# =============================================================================

import logging

import boto3
from botocore.client import BaseClient
from botocore.config import Config

logger = logging.getLogger(__name__)


def create_s3_client(
    access_key_id: str,
    secret_access_key: str,
    region: str,
) -> BaseClient:
    """
    Create an S3 client with static credentials.

    Signature version 4 is forced so presigned URLs carry
    X-Amz-Date / X-Amz-Expires query parameters.

    Args:
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        region: Bucket region (e.g., "us-east-1")

    Returns:
        botocore S3 client

    Raises:
        botocore.exceptions.BotoCoreError: If the region or credentials are malformed
    """
    client = boto3.client(
        "s3",
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        region_name=region,
        config=Config(signature_version="s3v4"),
    )
    logger.info(f"S3 client initialized for region {region}")
    return client
