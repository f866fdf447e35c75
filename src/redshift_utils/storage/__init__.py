"""
Object storage module.

Components:
    - LifecycleRule / LifecycleStatus: bucket lifecycle rule schema
    - check_that_bucket_has_object_lifecycle_configuration(): advisory temp-dir check
    - S3LifecycleClient: boto3 implementation of the StorageClient protocol
    - InMemoryLifecycleClient: StorageClient test double
"""

from redshift_utils.storage.lifecycle import (
    check_that_bucket_has_object_lifecycle_configuration,
    has_matching_lifecycle_rule,
)
from redshift_utils.storage.models import LifecycleRule, LifecycleStatus
from redshift_utils.storage.s3_client import S3LifecycleClient
from redshift_utils.storage.testing import InMemoryLifecycleClient

__all__ = [
    "LifecycleRule",
    "LifecycleStatus",
    "check_that_bucket_has_object_lifecycle_configuration",
    "has_matching_lifecycle_rule",
    "S3LifecycleClient",
    "InMemoryLifecycleClient",
]
