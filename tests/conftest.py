"""Test configuration and shared fixtures."""

import pytest

from funcore.core.fresh import reset


@pytest.fixture(autouse=True)
def fresh_names():
    """Start every test with a fresh-name counter at zero."""
    reset()
    yield
    reset()
