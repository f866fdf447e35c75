"""
Core types and protocols used across modules.

This module provides the enums and protocol definitions shared by the URI,
storage and error modules so that injected collaborators (storage clients)
can be substituted in tests without importing boto3.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from redshift_utils.storage.models import LifecycleRule


class ErrorCategory(Enum):
    """
    Classification of error types for handling decisions.

    Categories:
        TRANSIENT: Temporary failures that may succeed if the caller retries
                   (e.g., network timeouts, throttling, 5xx from S3)
        PERMANENT: Failures that won't succeed on retry
                   (e.g., malformed URIs, invalid configuration, 403)
        UNKNOWN: Unclassified errors
    """

    TRANSIENT = "transient"
    PERMANENT = "permanent"
    UNKNOWN = "unknown"


class StorageClient(Protocol):
    """
    Protocol for the object-storage capability injected into lifecycle checks.

    Implementations perform a single lookup per call and raise their own
    errors on transport/service problems. Retries, if any, belong to the
    implementation.
    """

    def get_bucket_lifecycle_configuration(
        self, bucket_name: str
    ) -> Sequence["LifecycleRule"]:
        """
        Return the lifecycle rules configured on a bucket.

        Args:
            bucket_name: Bucket to look up

        Returns:
            Rules in the order the storage service returned them
            (empty when the bucket has no lifecycle configuration)
        """
        ...
