"""
Exception hierarchy for redshift_utils.

Provides typed exceptions with retry classification so callers of the
bulk-load pipeline can tell configuration bugs from transient S3 problems.
"""

from redshift_utils.types import ErrorCategory


class RedshiftUtilsError(Exception):
    """
    Base exception for all redshift_utils errors.

    Attributes:
        message: Human-readable error description
        category: Error classification for retry decisions
        cause: Original exception if wrapping
        context: Additional context dict for debugging
    """

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        context: dict | None = None,
    ):
        self.message = message
        self.cause = cause
        self.context = context or {}
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        return self.category in (ErrorCategory.TRANSIENT, ErrorCategory.UNKNOWN)

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


# =============================================================================
# Base categories
# =============================================================================


class TransientError(RedshiftUtilsError):
    """Base class for transient errors the caller may retry."""

    category = ErrorCategory.TRANSIENT


class PermanentError(RedshiftUtilsError):
    """Base class for permanent/non-retriable errors."""

    category = ErrorCategory.PERMANENT


# =============================================================================
# Domain-Specific Errors
# =============================================================================


class UriParseError(PermanentError, ValueError):
    """A string could not be parsed as a storage URI."""

    def __init__(
        self,
        message: str,
        uri: str | None = None,
        cause: Exception | None = None,
    ):
        # The raw URI may embed credentials; only the message is logged.
        super().__init__(message, cause)
        self.uri = uri

    def __str__(self) -> str:
        # The cause repeats the raw authority, credentials included
        return self.message


class LifecycleLookupError(TransientError):
    """Bucket lifecycle configuration could not be read from S3."""

    pass


class ConfigurationError(PermanentError):
    """Invalid or incomplete configuration."""

    pass


# =============================================================================
# Error Classification Utilities
# =============================================================================

TRANSIENT_ERROR_MARKERS = frozenset(
    {
        "429",
        "500",
        "502",
        "503",
        "504",
        "timeout",
        "timed out",
        "connection",
        "throttl",
        "slowdown",
        "slow down",
        "service unavailable",
        "internalerror",
    }
)

PERMANENT_ERROR_MARKERS = frozenset(
    {
        "403",
        "404",
        "accessdenied",
        "access denied",
        "nosuchbucket",
        "invalidaccesskeyid",
        "signaturedoesnotmatch",
    }
)


def classify_exception(exc: Exception) -> ErrorCategory:
    """Classify an exception into error category."""
    if isinstance(exc, RedshiftUtilsError):
        return exc.category

    if isinstance(exc, (TimeoutError, ConnectionError)):
        return ErrorCategory.TRANSIENT

    exc_str = f"{type(exc).__name__} {exc}".lower()
    if any(marker in exc_str for marker in PERMANENT_ERROR_MARKERS):
        return ErrorCategory.PERMANENT
    if any(marker in exc_str for marker in TRANSIENT_ERROR_MARKERS):
        return ErrorCategory.TRANSIENT

    return ErrorCategory.UNKNOWN


def wrap_exception(
    exc: Exception,
    default_class: type = RedshiftUtilsError,
    context: dict | None = None,
) -> RedshiftUtilsError:
    """Wrap a generic exception in appropriate RedshiftUtilsError subclass."""
    if isinstance(exc, RedshiftUtilsError):
        if context:
            exc.context.update(context)
        return exc

    context = dict(context or {})
    context.setdefault("error_type", type(exc).__name__)
    context.setdefault("error_category", classify_exception(exc).value)

    return default_class(str(exc), cause=exc, context=context)
