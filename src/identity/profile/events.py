"""Domain events for the Profile aggregate."""

from protean.fields import Boolean, Identifier, String

from identity.domain import identity


@identity.event(part_of="Profile")
class ProfileCreated:
    """A profile row was created for a signed-up user."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String()
    is_admin: Boolean(default=False)


@identity.event(part_of="Profile")
class ProfileUpdated:
    __version__ = 1

    user_id: Identifier(required=True)
    name: String()
    avatar: String()
