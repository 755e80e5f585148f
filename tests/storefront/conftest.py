"""Fixtures for storefront tests.

The storefront talks to all three domains, so each is initialized once per
session and wiped after every test. No domain context is pushed here: the
storefront enters the right one for every remote call.
"""

import os
import random

import pytest


@pytest.fixture(scope="session")
def _catalogue_domain(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(scope="session")
def _identity_domain(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from identity.domain import identity

    identity.init()
    return identity


@pytest.fixture(scope="session")
def _ordering_domain(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from ordering.domain import ordering

    ordering.init()
    return ordering


@pytest.fixture(scope="session")
def domains(_catalogue_domain, _identity_domain, _ordering_domain):
    return _catalogue_domain, _identity_domain, _ordering_domain


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
    """Cleanup every domain after each test."""
    yield

    from shared.db import reset_data

    for domain in domains:
        reset_data(domain)


@pytest.fixture
def storage():
    from storefront.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def storefront(domains, storage):
    from storefront.client import Storefront

    shop = Storefront.create(*domains, storage=storage, rng=random.Random(42))
    yield shop
    shop.close()


@pytest.fixture
def products(_catalogue_domain, storefront):
    """The starter catalogue, keyed by product name."""
    from catalogue.product.seed import seed_catalogue

    with _catalogue_domain.domain_context():
        seed_catalogue()
    return {record.name: record for record in storefront.remote.list_products()}


@pytest.fixture
def shopper(storefront):
    """A registered, signed-in shopper."""
    result = storefront.session.register("jane@example.com", "s3cret!", "Jane")
    assert result.success, result.error
    return storefront.session.user


@pytest.fixture
def make_admin(_identity_domain):
    """Flag a user's profile as admin directly in the identity domain."""
    from identity.profile.profile import Profile

    def _make_admin(user_id):
        with _identity_domain.domain_context():
            repo = _identity_domain.repository_for(Profile)
            profile = repo.get(user_id)
            profile.is_admin = True
            repo.add(profile)

    return _make_admin
