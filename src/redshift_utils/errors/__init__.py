"""
Error handling module.

Provides the exception hierarchy and error classification used across
redshift_utils.
"""

from redshift_utils.errors.exceptions import (
    ConfigurationError,
    LifecycleLookupError,
    PermanentError,
    RedshiftUtilsError,
    TransientError,
    UriParseError,
    classify_exception,
    wrap_exception,
)
from redshift_utils.types import ErrorCategory

__all__ = [
    "ErrorCategory",
    "RedshiftUtilsError",
    "TransientError",
    "PermanentError",
    "UriParseError",
    "LifecycleLookupError",
    "ConfigurationError",
    "classify_exception",
    "wrap_exception",
]
