"""Application tests for profile row insert and update."""

import pytest
from identity.profile.management import CreateProfile, UpdateProfile
from identity.profile.profile import Profile
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _create_profile(**overrides):
    defaults = {"user_id": "user-1", "email": "jane@example.com", "name": "Jane"}
    defaults.update(overrides)
    return current_domain.process(CreateProfile(**defaults), asynchronous=False)


class TestCreateProfile:
    def test_create_profile(self):
        user_id = _create_profile()
        assert user_id == "user-1"

        profile = current_domain.repository_for(Profile).get("user-1")
        assert profile.email == "jane@example.com"
        assert profile.name == "Jane"
        assert profile.is_admin is False

    def test_create_admin_profile(self):
        _create_profile(is_admin=True)
        assert current_domain.repository_for(Profile).get("user-1").is_admin is True

    def test_duplicate_profile_is_rejected(self):
        _create_profile()
        with pytest.raises(ValidationError) as exc:
            _create_profile()
        assert "id" in exc.value.messages


class TestUpdateProfile:
    def test_update_profile(self):
        _create_profile()
        current_domain.process(UpdateProfile(user_id="user-1", name="Jane Smith"), asynchronous=False)
        assert current_domain.repository_for(Profile).get("user-1").name == "Jane Smith"

    def test_update_missing_profile(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateProfile(user_id="ghost", name="Ghost"), asynchronous=False)
