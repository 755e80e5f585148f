"""AuthSession aggregate: an access token issued to an account on sign-in."""

import secrets
from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String

from identity.domain import identity


@identity.aggregate
class AuthSession:
    account_id: Identifier(required=True)
    access_token: String(required=True, max_length=128, unique=True)
    created_at: DateTime(default=datetime.now)
    revoked: Boolean(default=False)

    @classmethod
    def issue(cls, account_id):
        return cls(account_id=account_id, access_token=secrets.token_urlsafe(32))

    def revoke(self):
        from identity.account.events import SessionRevoked

        if self.revoked:
            raise ValidationError({"session": ["Session already revoked"]})
        self.revoked = True
        self.raise_(SessionRevoked(session_id=self.id, account_id=self.account_id))
