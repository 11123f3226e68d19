"""Pytest configuration and fixtures for simpledatetime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so simpledatetime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from simpledatetime import DateImmutable, TimeImmutable  # noqa: E402


@pytest.fixture
def wednesday() -> DateImmutable:
    """2025-01-15, a Wednesday in a 31-day month."""
    return DateImmutable("2025-01-15")


@pytest.fixture
def afternoon() -> TimeImmutable:
    """14:30:45.123456."""
    return TimeImmutable("14:30:45.123456")
