"""
pytest configuration for redshift_utils tests.

Adds src directory to Python path for imports and sets up test environment.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from redshift_utils.config import reset_config  # noqa: E402
from redshift_utils.logging import clear_log_context  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_global_state():
    """Reset the config singleton and log context around every test."""
    reset_config()
    clear_log_context()
    yield
    reset_config()
    clear_log_context()
