"""Profile aggregate: one row of the profiles table, keyed by the account id."""

from protean.exceptions import ValidationError
from protean.fields import Boolean, String

from identity.domain import identity

EDITABLE_FIELDS = ("name", "avatar")


@identity.aggregate
class Profile:
    """Display data for a user.

    The identifier is the owning account's id, so a profile is fetched with
    the user id directly. `is_admin` is never changed through `update`.
    """

    email: String(required=True, max_length=254)
    name: String(max_length=255)
    is_admin: Boolean(default=False)
    avatar: String(max_length=500)

    @classmethod
    def create(cls, user_id, email, name=None, is_admin=False, avatar=None):
        from identity.profile.events import ProfileCreated

        profile = cls(id=user_id, email=email, name=name, is_admin=is_admin, avatar=avatar)
        profile.raise_(ProfileCreated(user_id=profile.id, email=email, name=name, is_admin=is_admin))
        return profile

    def update(self, **changes):
        from identity.profile.events import ProfileUpdated

        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({"profile": [f"Cannot update field(s): {', '.join(unknown)}"]})

        for field_name, value in changes.items():
            if value is not None:
                setattr(self, field_name, value)

        self.raise_(ProfileUpdated(user_id=self.id, name=self.name, avatar=self.avatar))
