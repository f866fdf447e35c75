"""
boto3-backed storage client for bucket lifecycle lookups.

Implements the StorageClient protocol used by the lifecycle check. Errors
from botocore are wrapped in LifecycleLookupError; a bucket without any
lifecycle configuration is reported as an empty rule list.
"""

import logging
from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from redshift_utils.errors.exceptions import LifecycleLookupError, wrap_exception
from redshift_utils.storage.models import LifecycleRule

logger = logging.getLogger(__name__)

NO_LIFECYCLE_CONFIGURATION = "NoSuchLifecycleConfiguration"


class S3LifecycleClient:
    """Reads bucket lifecycle rules through a boto3 S3 client."""

    def __init__(self, client: Any):
        self.client = client

    @classmethod
    def create(
        cls,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> "S3LifecycleClient":
        """Build a client from the default boto3 credential chain."""
        session = boto3.session.Session(region_name=region) if region else boto3.session.Session()
        return cls(session.client("s3", endpoint_url=endpoint_url or None))

    @classmethod
    def from_config(cls, config) -> "S3LifecycleClient":
        return cls.create(region=config.aws_region, endpoint_url=config.s3_endpoint_url)

    def get_bucket_lifecycle_configuration(self, bucket_name: str) -> List[LifecycleRule]:
        try:
            response = self.client.get_bucket_lifecycle_configuration(Bucket=bucket_name)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            if error_code == NO_LIFECYCLE_CONFIGURATION:
                logger.debug(
                    "Bucket has no lifecycle configuration",
                    extra={"bucket": bucket_name},
                )
                return []
            raise wrap_exception(
                e,
                LifecycleLookupError,
                context={"bucket": bucket_name, "error_code": error_code},
            ) from e
        except BotoCoreError as e:
            raise wrap_exception(
                e,
                LifecycleLookupError,
                context={"bucket": bucket_name},
            ) from e

        rules = [LifecycleRule.from_s3(rule) for rule in response.get("Rules", [])]
        logger.debug(
            "Loaded bucket lifecycle rules",
            extra={"bucket": bucket_name, "rule_count": len(rules)},
        )
        return rules
