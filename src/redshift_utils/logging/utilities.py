"""Logging utility functions."""

import logging
import re
from typing import Any

from redshift_utils.errors.exceptions import RedshiftUtilsError, classify_exception

# user:pass@ in the authority component of a URI
URI_CREDENTIALS_PATTERN = re.compile(r"(://)[^/@\s]+@")


def strip_uri_credentials(text: str) -> str:
    """Remove embedded user-info from every URI found in text."""
    return URI_CREDENTIALS_PATTERN.sub(r"\1", text)


# Reserved LogRecord attribute names that cannot be used in extra dict
_RESERVED_LOG_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "asctime",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


def log_with_context(
    logger: logging.Logger,
    level: int,
    msg: str,
    **kwargs: Any,
) -> None:
    """
    Log with structured context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Additional context fields (bucket, storage_uri, etc.)
                  Note: exc_info=True is supported and handled specially.

    Example:
        log_with_context(
            logger, logging.INFO, "Lifecycle rules loaded",
            bucket="my-bucket",
            rule_count=3,
        )
    """
    exc_info = kwargs.pop("exc_info", None)

    # Filter out reserved keys to prevent LogRecord conflicts
    extra = {k: v for k, v in kwargs.items() if k not in _RESERVED_LOG_KEYS}

    logger.log(level, msg, exc_info=exc_info, extra=extra)


def log_exception(
    logger: logging.Logger,
    exc: Exception,
    msg: str,
    level: int = logging.ERROR,
    include_traceback: bool = True,
    **kwargs: Any,
) -> None:
    """
    Log exception with context and optional traceback.

    Adds error_type, error_category and error_message to the record;
    RedshiftUtilsError context entries are merged in as well.
    """
    extra = {
        "error_type": type(exc).__name__,
        "error_category": classify_exception(exc).value,
        "error_message": strip_uri_credentials(str(exc))[:500],
    }
    if isinstance(exc, RedshiftUtilsError):
        extra.update({k: v for k, v in exc.context.items() if k not in extra})
    extra.update(kwargs)

    log_with_context(
        logger,
        level,
        msg,
        exc_info=exc if include_traceback else None,
        **extra,
    )
