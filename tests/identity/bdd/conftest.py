"""Shared BDD fixtures for the Identity domain."""

import pytest


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}
