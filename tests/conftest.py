"""Pytest configuration and fixtures for civiltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so civiltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def invalid_date():
    """A non-nil Date whose day number is outside the supported range."""
    from civiltime import Date

    return Date._from_day_number(Date.MAX.day_number + 1)
