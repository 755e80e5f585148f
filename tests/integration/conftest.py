"""Fixtures for tests that go through the assembled ShopWise application.

Importing `app` initializes every domain. Requests get their domain context
from the app's middleware, so tests only need to wipe data afterwards.
"""

import os

import pytest


@pytest.fixture(scope="session")
def shopwise_app(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


@pytest.fixture(scope="session")
def domains(shopwise_app):
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    return catalogue, identity, ordering


@pytest.fixture(scope="session", autouse=True)
def setup_databases(domains):
    from shared.db import drop_db, setup_db

    for domain in domains:
        setup_db(domain)

    yield

    for domain in domains:
        drop_db(domain)


@pytest.fixture(autouse=True)
def run_around_tests(domains):
    yield

    from shared.db import reset_data

    for domain in domains:
        reset_data(domain)


@pytest.fixture
def client(shopwise_app):
    from fastapi.testclient import TestClient

    return TestClient(shopwise_app)
