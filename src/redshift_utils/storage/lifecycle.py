"""
Advisory check for object expiration on the bulk-load temp bucket.

The loader leaves staged files under its temp directory. Without an S3
lifecycle rule covering that prefix they accumulate forever, so the check
warns about it. It never blocks a load: any problem reading the lifecycle
configuration turns into a False result and a warning.
"""

import logging
from collections.abc import Sequence
from typing import Iterable

from redshift_utils.errors.exceptions import UriParseError
from redshift_utils.logging.utilities import log_exception, log_with_context
from redshift_utils.storage.models import LifecycleRule
from redshift_utils.types import StorageClient
from redshift_utils.uri.models import StorageURI
from redshift_utils.uri.utils import fix_s3_url, remove_credentials_from_uri

logger = logging.getLogger(__name__)


def has_matching_lifecycle_rule(rules: Iterable[LifecycleRule], key: str) -> bool:
    """
    True if any enabled rule has no prefix or a prefix of key.

    Note: this only checks that an active rule matches the temp directory;
    it does not check that the rule actually expires objects.
    """
    return any(rule.applies_to(key) for rule in rules)


def check_that_bucket_has_object_lifecycle_configuration(
    uri: str,
    storage_client: StorageClient,
) -> bool:
    """
    Warn when the bucket behind uri has no lifecycle rule for its prefix.

    Makes a single get_bucket_lifecycle_configuration() call through the
    injected client. No retries.

    Args:
        uri: Temp directory URI (s3://, s3n:// or s3a://)
        storage_client: Object exposing get_bucket_lifecycle_configuration()

    Returns:
        True if the lifecycle configuration was read (a warning is logged
        when no enabled rule covers the prefix), False if the lookup failed
    """
    try:
        location = StorageURI.parse(fix_s3_url(uri))
        safe_uri = str(remove_credentials_from_uri(location))
        bucket = location.bucket
        key = location.key

        rules = storage_client.get_bucket_lifecycle_configuration(bucket)
        if rules is None or not isinstance(rules, Sequence):
            raise TypeError(
                f"Unexpected lifecycle configuration response: {type(rules).__name__}"
            )

        if not has_matching_lifecycle_rule(rules, key):
            log_with_context(
                logger,
                logging.WARNING,
                f"The S3 bucket {bucket} does not have an object lifecycle configuration "
                "to ensure cleanup of temporary files. Consider configuring `tempdir` "
                "to point to a bucket with an object lifecycle policy that automatically "
                "deletes files after an expiration period.",
                bucket=bucket,
                key=key,
                storage_uri=safe_uri,
                rule_count=len(rules),
                enabled_rule_count=sum(1 for rule in rules if rule.is_enabled),
            )
        else:
            log_with_context(
                logger,
                logging.DEBUG,
                "Bucket lifecycle configuration covers temp directory",
                bucket=bucket,
                storage_uri=safe_uri,
                rule_count=len(rules),
            )
        return True

    except Exception as e:
        log_exception(
            logger,
            e,
            "An error occurred while trying to read the S3 bucket lifecycle configuration",
            level=logging.WARNING,
            # A parse failure's chained cause carries the raw authority
            include_traceback=not isinstance(e, UriParseError),
        )
        return False
