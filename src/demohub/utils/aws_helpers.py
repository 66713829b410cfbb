"""S3 access for the public stage bucket."""

from pathlib import Path
from typing import Any, Iterator, Optional, Sequence, Union
import boto3
from botocore import UNSIGNED
from botocore.config import Config as BotoConfig
from botocore.exceptions import ClientError

from ..config import config
from .logger import get_logger

logger = get_logger(__name__)


def get_s3_client(anonymous: Optional[bool] = None, region: Optional[str] = None) -> Any:
    """
    S3 client for the stage bucket.

    Args:
        anonymous: Send unsigned requests, so no credentials are needed for
            the public bucket. If None, uses config.
        region: AWS region. If None, uses config.
    """
    if anonymous is None:
        anonymous = config.stage.anonymous
    region = region or config.stage.region
    logger.debug(f"Creating S3 client in {region} (unsigned={anonymous})")
    if anonymous:
        return boto3.client("s3", region_name=region, config=BotoConfig(signature_version=UNSIGNED))
    return boto3.client("s3", region_name=region)


def iter_s3_keys(
    bucket: str,
    prefix: str = "",
    suffixes: Sequence[str] = (),
    anonymous: Optional[bool] = None
) -> Iterator[str]:
    """
    Yield object keys under a prefix, page by page.

    Args:
        bucket: S3 bucket name
        prefix: Key prefix
        suffixes: Only keys ending in one of these (case-insensitive)
        anonymous: Use unsigned requests. If None, uses config.
    """
    wanted = tuple(s.lower() for s in suffixes)
    paginator = get_s3_client(anonymous).get_paginator("list_objects_v2")
    for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
        for obj in page.get("Contents", []):
            key = obj["Key"]
            if not wanted or key.lower().endswith(wanted):
                yield key


def list_s3_keys(
    bucket: str,
    prefix: str = "",
    suffixes: Sequence[str] = (),
    anonymous: Optional[bool] = None
) -> list:
    """
    Object keys under a prefix.

    Returns:
        List of keys, empty when the listing fails.
    """
    logger.info(f"Listing s3://{bucket}/{prefix}")
    try:
        keys = list(iter_s3_keys(bucket, prefix, suffixes, anonymous))
    except ClientError as e:
        logger.error(f"Failed to list s3://{bucket}/{prefix}: {e}")
        return []
    logger.info(f"Found {len(keys)} objects")
    return keys


def download_object(
    bucket: str,
    key: str,
    dest: Union[str, Path],
    anonymous: Optional[bool] = None
) -> bool:
    """
    Download one object, creating the destination directory.

    Returns:
        True if the file was written, False otherwise.
    """
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    try:
        get_s3_client(anonymous).download_file(bucket, key, str(dest))
    except ClientError as e:
        logger.error(f"Failed to download s3://{bucket}/{key}: {e}")
        return False
    logger.info(f"Downloaded s3://{bucket}/{key} to {dest}")
    return True


def bucket_accessible(bucket: str, anonymous: Optional[bool] = None) -> bool:
    """True if the bucket exists and can be read with the current client."""
    try:
        get_s3_client(anonymous).head_bucket(Bucket=bucket)
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "")
        if code in ("404", "NoSuchBucket"):
            logger.warning(f"Bucket {bucket} does not exist")
        else:
            logger.error(f"Cannot access bucket {bucket}: {e}")
        return False
    return True
