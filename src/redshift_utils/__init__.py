"""
redshift_utils: URI and storage helpers for the Redshift bulk loader.

Modules:
    uri         - Storage URI parsing, scheme/endpoint rewriting, temp paths,
                  credential stripping, region lookup from JDBC URLs
    storage     - Bucket lifecycle rules and the advisory temp-dir check
    errors      - Exception hierarchy and error classification
    logging     - Structured JSON logging with credential-free URI fields
    config      - YAML configuration

Design Principles:
    - Stateless, thread-safe functions; no network I/O outside the injected
      storage client
    - URIs are passed through remove_credentials_from_uri() before logging
"""

from .errors import UriParseError
from .storage import (
    LifecycleRule,
    LifecycleStatus,
    check_that_bucket_has_object_lifecycle_configuration,
)
from .types import ErrorCategory, StorageClient
from .uri import (
    StorageURI,
    add_endpoint_to_url,
    fix_s3_url,
    get_region_for_redshift_cluster,
    join_urls,
    make_temp_path,
    remove_credentials_from_uri,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCategory",
    "StorageClient",
    "UriParseError",
    "StorageURI",
    "LifecycleRule",
    "LifecycleStatus",
    "add_endpoint_to_url",
    "check_that_bucket_has_object_lifecycle_configuration",
    "fix_s3_url",
    "get_region_for_redshift_cluster",
    "join_urls",
    "make_temp_path",
    "remove_credentials_from_uri",
]
