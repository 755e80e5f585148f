"""Session/Identity Holder: the signed-in user and their profile."""

import structlog

from storefront.auth import SIGNED_IN, SIGNED_OUT, USER_UPDATED
from storefront.errors import OperationResult, RemoteRequestFailed, StorefrontError, Unauthenticated, UnexpectedError
from storefront.records import ProfileRecord

logger = structlog.get_logger(__name__)


def default_profile(user) -> ProfileRecord:
    """Profile used when the profiles row is missing or unreadable."""
    return ProfileRecord(
        id=user.id,
        email=user.email,
        name=user.user_metadata.get("name"),
        is_admin=False,
    )


class SessionHolder:
    """Tracks who is signed in.

    `start()` restores an existing session and subscribes to session-change
    notifications, which keep `user` and `profile` current until `close()`.
    """

    def __init__(self, remote):
        self.remote = remote
        self.user = None
        self.profile: ProfileRecord | None = None
        self.is_loading = False
        self._subscription = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return bool(self.profile and self.profile.is_admin)

    # --- Lifecycle ---

    def start(self) -> None:
        self.is_loading = True
        try:
            session = self.remote.auth.get_session()
            if session is not None:
                self._set_identity(session.user)
        except StorefrontError as exc:
            logger.error("session_restore_failed", error=exc.message)
        finally:
            self.is_loading = False

        if self._subscription is None:
            self._subscription = self.remote.auth.on_auth_state_change(self._on_auth_state_change)

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_auth_state_change(self, event, session) -> None:
        if event == SIGNED_IN and session is not None:
            self._set_identity(session.user)
        elif event == SIGNED_OUT:
            self.user = None
            self.profile = None
        elif event == USER_UPDATED and session is not None:
            self.user = session.user
            if self.profile is not None:
                self.profile = self.profile.model_copy(
                    update={"name": session.user.user_metadata.get("name", self.profile.name)}
                )

    def _set_identity(self, user) -> None:
        self.user = user
        self.profile = self._load_profile(user)

    def _load_profile(self, user) -> ProfileRecord:
        try:
            profile = self.remote.fetch_profile(user.id)
        except RemoteRequestFailed as exc:
            logger.warning("profile_fetch_failed", user_id=user.id, error=exc.message)
            profile = None
        return profile or default_profile(user)

    # --- Operations ---

    def login(self, email, password) -> OperationResult:
        self.is_loading = True
        try:
            session = self.remote.auth.sign_in_with_password(email, password)
            if self._subscription is None:
                # A started holder already took the identity from the SIGNED_IN notification
                self._set_identity(session.user)
        except StorefrontError as exc:
            logger.info("login_failed", error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("login_crashed")
            return OperationResult.failed(UnexpectedError())
        finally:
            self.is_loading = False
        return OperationResult.ok()

    def register(self, email, password, name) -> OperationResult:
        """Sign up, then insert the profiles row for the new user."""
        self.is_loading = True
        try:
            session = self.remote.auth.sign_up(email, password, user_metadata={"name": name})
            profile = ProfileRecord(id=session.user.id, email=session.user.email, name=name, is_admin=False)
            try:
                self.remote.insert_profile(profile)
            except RemoteRequestFailed as exc:
                raise RemoteRequestFailed(f"Database error saving new user: {exc.message}") from exc
            self.user = session.user
            self.profile = profile
        except StorefrontError as exc:
            logger.info("registration_failed", error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("registration_crashed")
            return OperationResult.failed(UnexpectedError())
        finally:
            self.is_loading = False
        return OperationResult.ok()

    def logout(self) -> OperationResult:
        try:
            self.remote.auth.sign_out()
        except StorefrontError as exc:
            logger.warning("logout_failed", error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("logout_crashed")
            return OperationResult.failed(UnexpectedError())
        self.user = None
        self.profile = None
        return OperationResult.ok()

    def update_profile(self, **changes) -> OperationResult:
        """Update the profiles row, then mirror the name into the auth user metadata."""
        if self.user is None:
            return OperationResult.failed(Unauthenticated("Not authenticated"))

        try:
            self.remote.update_profile(self.user.id, **changes)
            if "name" in changes:
                self.remote.auth.update_user({"name": changes["name"]})
        except StorefrontError as exc:
            logger.warning("profile_update_failed", user_id=self.user.id, error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("profile_update_crashed", user_id=self.user.id)
            return OperationResult.failed(UnexpectedError())

        current = self.profile or default_profile(self.user)
        self.profile = current.model_copy(update={k: v for k, v in changes.items() if v is not None})
        return OperationResult.ok()
