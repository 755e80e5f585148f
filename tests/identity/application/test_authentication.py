"""Application tests for sign-up, sign-in, sign-out and metadata updates."""

import json

import pytest
from identity.account.account import Account
from identity.account.authentication import SignIn, SignOut, SignUp, UpdateUserMetadata
from identity.account.session import AuthSession
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


def _sign_up(email="jane@example.com", password="s3cret!", **metadata):
    command = SignUp(email=email, password=password, user_metadata=json.dumps(metadata) if metadata else None)
    return current_domain.process(command, asynchronous=False)


def _sign_in(email="jane@example.com", password="s3cret!"):
    return current_domain.process(SignIn(email=email, password=password), asynchronous=False)


class TestSignUp:
    def test_sign_up_returns_account_id(self):
        account_id = _sign_up(name="Jane")
        account = current_domain.repository_for(Account).get(account_id)
        assert account.email == "jane@example.com"
        assert account.metadata == {"name": "Jane"}

    def test_duplicate_email_is_rejected(self):
        _sign_up()
        with pytest.raises(ValidationError) as exc:
            _sign_up(email="JANE@example.com")
        assert exc.value.messages["email"] == ["User already registered"]

    def test_short_password_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _sign_up(password="123")
        assert "password" in exc.value.messages


class TestSignIn:
    def test_sign_in_issues_token(self):
        account_id = _sign_up()
        token = _sign_in()

        session = current_domain.repository_for(AuthSession).find_active(token)
        assert session is not None
        assert session.account_id == account_id

    def test_sign_in_records_time(self):
        account_id = _sign_up()
        _sign_in()
        assert current_domain.repository_for(Account).get(account_id).last_sign_in_at is not None

    def test_email_lookup_is_case_insensitive(self):
        _sign_up()
        assert _sign_in(email="Jane@Example.com")

    def test_wrong_password(self):
        _sign_up()
        with pytest.raises(ValidationError) as exc:
            _sign_in(password="nope-nope")
        assert exc.value.messages["credentials"] == ["Invalid login credentials"]

    def test_unknown_email(self):
        with pytest.raises(ValidationError) as exc:
            _sign_in(email="ghost@example.com")
        assert exc.value.messages["credentials"] == ["Invalid login credentials"]

    def test_each_sign_in_gets_its_own_token(self):
        _sign_up()
        assert _sign_in() != _sign_in()


class TestSignOut:
    def test_sign_out_revokes_session(self):
        _sign_up()
        token = _sign_in()

        current_domain.process(SignOut(access_token=token), asynchronous=False)

        assert current_domain.repository_for(AuthSession).find_active(token) is None

    def test_sign_out_with_unknown_token_is_a_no_op(self):
        current_domain.process(SignOut(access_token="unknown"), asynchronous=False)


class TestUpdateUserMetadata:
    def test_update_merges_metadata(self):
        account_id = _sign_up(name="Jane", theme="dark")
        token = _sign_in()

        command = UpdateUserMetadata(access_token=token, user_metadata=json.dumps({"name": "Jane Smith"}))
        current_domain.process(command, asynchronous=False)

        account = current_domain.repository_for(Account).get(account_id)
        assert account.metadata == {"name": "Jane Smith", "theme": "dark"}

    def test_update_requires_active_session(self):
        _sign_up()
        token = _sign_in()
        current_domain.process(SignOut(access_token=token), asynchronous=False)

        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                UpdateUserMetadata(access_token=token, user_metadata=json.dumps({"name": "X"})),
                asynchronous=False,
            )
        assert exc.value.messages["session"] == ["Auth session missing"]
