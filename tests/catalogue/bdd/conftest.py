"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.product.seed import seed_catalogue
from protean.exceptions import ValidationError
from pytest_bdd import given, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("the starter catalogue", target_fixture="product_ids")
def starter_catalogue():
    return seed_catalogue()


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)
