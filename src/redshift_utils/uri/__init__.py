"""
Storage URI module.

Provides parsing and normalization of the S3 locations used by the bulk loader.

Components:
    - StorageURI / Credentials: parsed URI with optional embedded access keys
    - join_urls(), make_temp_path(): build staging directory URIs
    - fix_s3_url(), add_endpoint_to_url(): rewrite URIs for Redshift
    - remove_credentials_from_uri(): safe-to-log form of a URI
    - get_region_for_redshift_cluster(): region hint from a JDBC URL
"""

from redshift_utils.uri.models import Credentials, StorageURI
from redshift_utils.uri.utils import (
    DEFAULT_S3_ENDPOINT_DOMAIN,
    add_endpoint_to_url,
    fix_s3_url,
    get_region_for_redshift_cluster,
    join_urls,
    make_temp_path,
    remove_credentials_from_uri,
)

__all__ = [
    "Credentials",
    "StorageURI",
    "DEFAULT_S3_ENDPOINT_DOMAIN",
    "add_endpoint_to_url",
    "fix_s3_url",
    "get_region_for_redshift_cluster",
    "join_urls",
    "make_temp_path",
    "remove_credentials_from_uri",
]
