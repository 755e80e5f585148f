"""Client for the identity domain's auth operations.

Mirrors a hosted auth provider's client: the access token of the current
session is kept in local storage, and listeners registered with
`on_auth_state_change` are told about sign-in, sign-out and user updates.
"""

import json

import structlog
from protean.utils.globals import current_domain

from identity.account.account import Account
from identity.account.authentication import SignIn, SignOut, SignUp, UpdateUserMetadata
from identity.account.session import AuthSession as SessionAggregate
from storefront.context import remote_call
from storefront.errors import RemoteRequestFailed
from storefront.records import AuthSession, AuthUser

logger = structlog.get_logger(__name__)

SESSION_KEY = "auth-token"

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"
USER_UPDATED = "USER_UPDATED"


class Subscription:
    def __init__(self, listeners, callback):
        self._listeners = listeners
        self._callback = callback

    def unsubscribe(self):
        if self._callback in self._listeners:
            self._listeners.remove(self._callback)


class AuthClient:
    def __init__(self, domain, storage):
        self.domain = domain
        self.storage = storage
        self._listeners = []

    # --- Session-change notifications ---

    def on_auth_state_change(self, callback) -> Subscription:
        """Register `callback(event, session)`; returns a handle to unsubscribe."""
        self._listeners.append(callback)
        return Subscription(self._listeners, callback)

    def _notify(self, event, session):
        logger.debug("auth_state_changed", auth_event=event)
        for callback in list(self._listeners):
            callback(event, session)

    # --- Operations ---

    def _load_session(self, access_token) -> AuthSession | None:
        session = current_domain.repository_for(SessionAggregate).find_active(access_token)
        if session is None:
            return None
        account = current_domain.repository_for(Account).get(session.account_id)
        return AuthSession(access_token=access_token, user=AuthUser.from_account(account))

    def get_session(self) -> AuthSession | None:
        """The stored session if it is still active. A revoked token is forgotten."""
        token = self.storage.get(SESSION_KEY)
        if not token:
            return None

        with remote_call(self.domain):
            session = self._load_session(token)

        if session is None:
            self.storage.remove(SESSION_KEY)
        return session

    def sign_in_with_password(self, email, password) -> AuthSession:
        with remote_call(self.domain):
            token = current_domain.process(SignIn(email=email, password=password), asynchronous=False)
            session = self._load_session(token)

        self.storage.set(SESSION_KEY, token)
        self._notify(SIGNED_IN, session)
        return session

    def sign_up(self, email, password, user_metadata=None) -> AuthSession:
        """Create the account and sign straight in."""
        with remote_call(self.domain):
            command = SignUp(
                email=email,
                password=password,
                user_metadata=json.dumps(user_metadata) if user_metadata else None,
            )
            current_domain.process(command, asynchronous=False)

        return self.sign_in_with_password(email, password)

    def sign_out(self) -> None:
        token = self.storage.get(SESSION_KEY)
        if token:
            with remote_call(self.domain):
                current_domain.process(SignOut(access_token=token), asynchronous=False)
            self.storage.remove(SESSION_KEY)
        self._notify(SIGNED_OUT, None)

    def update_user(self, data) -> AuthUser:
        """Merge `data` into the signed-in user's metadata."""
        token = self.storage.get(SESSION_KEY)
        if not token:
            raise RemoteRequestFailed("Auth session missing")

        with remote_call(self.domain):
            command = UpdateUserMetadata(access_token=token, user_metadata=json.dumps(data))
            current_domain.process(command, asynchronous=False)
            session = self._load_session(token)

        self._notify(USER_UPDATED, session)
        return session.user
