"""Profile row insert and update: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.profile.profile import Profile


@identity.command(part_of="Profile")
class CreateProfile:
    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    name: String(max_length=255)
    is_admin: Boolean(default=False)
    avatar: String(max_length=500)


@identity.command(part_of="Profile")
class UpdateProfile:
    user_id: Identifier(required=True)
    name: String(max_length=255)
    avatar: String(max_length=500)


@identity.command_handler(part_of=Profile)
class ManageProfileHandler:
    @handle(CreateProfile)
    def create_profile(self, command):
        repo = current_domain.repository_for(Profile)
        if repo._dao.query.filter(id=command.user_id).all().items:
            raise ValidationError({"id": ["Profile already exists for this user"]})

        profile = Profile.create(
            user_id=command.user_id,
            email=command.email,
            name=command.name,
            is_admin=command.is_admin,
            avatar=command.avatar,
        )
        repo.add(profile)
        logger.info("profile_created", user_id=str(profile.id))
        return str(profile.id)

    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Profile)
        profile = repo.get(command.user_id)
        profile.update(name=command.name, avatar=command.avatar)
        repo.add(profile)
