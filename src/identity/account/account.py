"""Account aggregate: an email/password identity with free-form user metadata."""

import json
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from identity.account.passwords import MIN_PASSWORD_LENGTH, hash_password, verify_password
from identity.domain import identity
from identity.shared.email import EmailAddress


@identity.aggregate
class Account:
    """A user known to the auth provider.

    The email is stored normalized (trimmed, lower-cased) and is unique. The
    password is never kept, only its hash. `user_metadata` is a JSON object
    serialized to text; callers read and write it as a dict through
    `metadata` and `update_metadata`.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    user_metadata: Text(default="{}")
    created_at: DateTime(default=datetime.now)
    last_sign_in_at: DateTime()

    @invariant.post
    def user_metadata_must_be_a_json_object(self):
        try:
            value = json.loads(self.user_metadata or "{}")
        except ValueError:
            raise ValidationError({"user_metadata": ["User metadata must be valid JSON"]})
        if not isinstance(value, dict):
            raise ValidationError({"user_metadata": ["User metadata must be a JSON object"]})

    @classmethod
    def sign_up(cls, email, password, user_metadata=None):
        from identity.account.events import AccountSignedUp

        address = EmailAddress.normalized(email).address
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                {"password": [f"Password should be at least {MIN_PASSWORD_LENGTH} characters"]}
            )

        now = datetime.now()
        account = cls(
            email=address,
            password_hash=hash_password(password),
            user_metadata=json.dumps(user_metadata or {}),
            created_at=now,
        )
        account.raise_(AccountSignedUp(account_id=account.id, email=address, signed_up_at=now))
        return account

    @property
    def metadata(self) -> dict:
        return json.loads(self.user_metadata or "{}")

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)

    def record_sign_in(self):
        from identity.account.events import AccountSignedIn

        self.last_sign_in_at = datetime.now()
        self.raise_(AccountSignedIn(account_id=self.id, signed_in_at=self.last_sign_in_at))

    def update_metadata(self, changes):
        """Merge `changes` into the metadata. Keys set to None are dropped."""
        from identity.account.events import UserMetadataUpdated

        metadata = self.metadata
        for key, value in (changes or {}).items():
            if value is None:
                metadata.pop(key, None)
            else:
                metadata[key] = value

        self.user_metadata = json.dumps(metadata)
        self.raise_(UserMetadataUpdated(account_id=self.id, user_metadata=self.user_metadata))
