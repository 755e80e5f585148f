"""Admin product management, gated on the profile's admin flag."""

from unittest.mock import patch

import pytest


@pytest.fixture
def admin(storefront, shopper, make_admin):
    make_admin(shopper.id)
    storefront.session.logout()
    storefront.session.login("jane@example.com", "s3cret!")
    return storefront.admin


class TestAccess:
    def test_signed_out_user_is_rejected(self, storefront):
        result = storefront.admin.load()

        assert result.success is False
        assert result.error == "Not authenticated"

    def test_non_admin_is_forbidden(self, storefront, shopper, products):
        result = storefront.admin.add(name="Sneaky", price=1.0)

        assert result.success is False
        assert result.reason == "forbidden"
        assert result.error == "You don't have permission to access this page."
        assert len(storefront.remote.list_products()) == len(products)


class TestProductManagement:
    def test_load(self, admin, products):
        result = admin.load()

        assert result.success is True
        assert [p.name for p in admin.products] == sorted(products)

    def test_add(self, admin, storefront):
        result = admin.add(name="Trail Runner", price=99.0, category="running", brand="Salomon")

        assert result.success is True
        assert [p.name for p in admin.products] == ["Trail Runner"]
        assert storefront.remote.list_products()[0].brand == "Salomon"

    @pytest.mark.parametrize(
        "fields, message",
        [
            ({"price": 10.0}, "Product name is required"),
            ({"name": "  ", "price": 10.0}, "Product name is required"),
            ({"name": "Freebie", "price": 0.0}, "Price must be greater than zero"),
        ],
    )
    def test_add_validation(self, admin, storefront, fields, message):
        result = admin.add(**fields)

        assert result.success is False
        assert result.reason == "invalid_input"
        assert result.error == message
        assert storefront.remote.list_products() == []

    def test_update(self, admin, products, storefront):
        shoe = products["Running Pro Max"]

        result = admin.update(shoe.id, price=119.99, description="Now cheaper")

        assert result.success is True
        updated = storefront.remote.get_product(shoe.id)
        assert updated.price == 119.99
        assert updated.description == "Now cheaper"
        assert updated.name == "Running Pro Max"

    def test_update_rejects_a_negative_price(self, admin, products):
        result = admin.update(products["Sport Elite"].id, price=-5.0)

        assert result.reason == "invalid_input"

    def test_update_unknown_product(self, admin):
        result = admin.update("unknown", price=10.0)

        assert result.success is False
        assert result.reason == "remote_request_failed"

    def test_remove(self, admin, products, storefront):
        admin.load()
        boot = products["Hiking Explorer"]

        result = admin.remove(boot.id)

        assert result.success is True
        assert boot.id not in {p.id for p in admin.products}
        assert boot.id not in {p.id for p in storefront.remote.list_products()}


class TestUnexpectedFailures:
    @pytest.mark.parametrize("price", ["abc", True])
    def test_price_must_be_a_number(self, admin, storefront, price):
        result = admin.add(name="Odd Shoe", price=price)

        assert result.success is False
        assert result.reason == "invalid_input"
        assert result.error == "Price must be a number"
        assert storefront.remote.list_products() == []

    def test_remote_crash_is_reported(self, admin, storefront):
        with patch.object(storefront.remote, "add_product", side_effect=RuntimeError("boom")):
            result = admin.add(name="Trail Runner", price=99.0)

        assert result.success is False
        assert result.reason == "unexpected_error"
        assert result.error == "An unexpected error occurred"
