"""
Structured logging module.

Provides JSON logging with context propagation and credential-free URI fields.
"""

from redshift_utils.logging.context import (
    clear_log_context,
    get_log_context,
    set_log_context,
)
from redshift_utils.logging.formatters import ConsoleFormatter, JSONFormatter
from redshift_utils.logging.setup import get_log_file_path, get_logger, setup_logging
from redshift_utils.logging.utilities import (
    log_exception,
    log_with_context,
    strip_uri_credentials,
)

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    "get_log_file_path",
    # Formatters
    "JSONFormatter",
    "ConsoleFormatter",
    # Context
    "set_log_context",
    "get_log_context",
    "clear_log_context",
    # Utilities
    "log_exception",
    "log_with_context",
    "strip_uri_credentials",
]
