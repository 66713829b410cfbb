"""Logging and S3 helpers shared by the demohub modules."""

from .logger import get_logger
from .aws_helpers import (
    get_s3_client,
    iter_s3_keys,
    list_s3_keys,
    download_object,
    bucket_accessible,
)

__all__ = [
    "get_logger",
    "get_s3_client",
    "iter_s3_keys",
    "list_s3_keys",
    "download_object",
    "bucket_accessible",
]
