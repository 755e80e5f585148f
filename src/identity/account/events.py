"""Domain events for the Account and AuthSession aggregates."""

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="Account")
class AccountSignedUp:
    """A new account was created with an email and password."""

    __version__ = 1

    account_id: Identifier(required=True)
    email: String(required=True)
    signed_up_at: DateTime(required=True)


@identity.event(part_of="Account")
class AccountSignedIn:
    __version__ = 1

    account_id: Identifier(required=True)
    signed_in_at: DateTime(required=True)


@identity.event(part_of="Account")
class UserMetadataUpdated:
    """The free-form metadata attached to an account changed."""

    __version__ = 1

    account_id: Identifier(required=True)
    user_metadata: String(required=True)


@identity.event(part_of="AuthSession")
class SessionRevoked:
    __version__ = 1

    session_id: Identifier(required=True)
    account_id: Identifier(required=True)
