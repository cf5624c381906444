"""
Pytest configuration and shared fixtures for pnrkoll tests.
"""

from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed reference date so century resolution is reproducible."""
    return date(2025, 3, 1)
