"""Lookups for accounts and sessions beyond get-by-id."""

from identity.account.account import Account
from identity.account.session import AuthSession
from identity.domain import identity


@identity.repository(part_of=Account)
class AccountRepository:
    def find_by_email(self, email) -> Account | None:
        address = (email or "").strip().lower()
        if not address:
            return None
        accounts = self._dao.query.filter(email=address).all().items
        return accounts[0] if accounts else None


@identity.repository(part_of=AuthSession)
class AuthSessionRepository:
    def find_active(self, access_token) -> AuthSession | None:
        """The unrevoked session holding `access_token`, if any."""
        if not access_token:
            return None
        sessions = self._dao.query.filter(access_token=access_token).all().items
        for session in sessions:
            if not session.revoked:
                return session
        return None
