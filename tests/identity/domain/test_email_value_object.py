"""Tests for the EmailAddress value object."""

import pytest
from identity.shared.email import EmailAddress
from protean.exceptions import ValidationError


class TestValidEmails:
    @pytest.mark.parametrize(
        "address",
        ["jane.doe@example.com", "j+shoes@mail.example.co.uk", "a@b.io"],
    )
    def test_accepts(self, address):
        assert EmailAddress(address=address).address == address

    def test_normalized_trims_and_lowercases(self):
        assert EmailAddress.normalized("  Jane.Doe@Example.COM ").address == "jane.doe@example.com"


class TestInvalidEmails:
    @pytest.mark.parametrize(
        "address",
        [
            "plainaddress",
            "two@@example.com",
            "@example.com",
            "jane@",
            "jane@localhost",
            "jane doe@example.com",
            "jane..doe@example.com",
            ".jane@example.com",
            "jane@-example.com",
            "jane<3@example.com",
        ],
    )
    def test_rejects(self, address):
        with pytest.raises(ValidationError) as exc:
            EmailAddress(address=address)
        assert "email" in exc.value.messages

    def test_address_is_required(self):
        with pytest.raises(ValidationError):
            EmailAddress()

    def test_normalized_rejects_empty(self):
        with pytest.raises(ValidationError):
            EmailAddress.normalized(None)
