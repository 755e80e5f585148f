"""Shared BDD fixtures for the Ordering domain."""

import pytest


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}
