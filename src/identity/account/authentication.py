"""Sign-up, sign-in, sign-out and user-metadata updates: commands and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from identity.account.account import Account
from identity.account.session import AuthSession
from identity.domain import identity, logger


@identity.command(part_of="Account")
class SignUp:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=255)
    user_metadata: Text()


@identity.command(part_of="Account")
class SignIn:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=255)


@identity.command(part_of="Account")
class SignOut:
    access_token: String(required=True, max_length=128)


@identity.command(part_of="Account")
class UpdateUserMetadata:
    """Merge the JSON object in `user_metadata` into the signed-in account's metadata."""

    access_token: String(required=True, max_length=128)
    user_metadata: Text(required=True)


def active_session(access_token) -> AuthSession:
    session = current_domain.repository_for(AuthSession).find_active(access_token)
    if session is None:
        raise ValidationError({"session": ["Auth session missing"]})
    return session


@identity.command_handler(part_of=Account)
class AuthenticationHandler:
    @handle(SignUp)
    def sign_up(self, command):
        repo = current_domain.repository_for(Account)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already registered"]})

        metadata = json.loads(command.user_metadata) if command.user_metadata else {}
        account = Account.sign_up(email=command.email, password=command.password, user_metadata=metadata)
        repo.add(account)
        logger.info("account_signed_up", account_id=str(account.id))
        return str(account.id)

    @handle(SignIn)
    def sign_in(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.find_by_email(command.email)
        if account is None or not account.check_password(command.password):
            logger.info("sign_in_rejected")
            raise ValidationError({"credentials": ["Invalid login credentials"]})

        account.record_sign_in()
        repo.add(account)

        session = AuthSession.issue(account.id)
        current_domain.repository_for(AuthSession).add(session)
        logger.info("account_signed_in", account_id=str(account.id), session_id=str(session.id))
        return session.access_token

    @handle(SignOut)
    def sign_out(self, command):
        repo = current_domain.repository_for(AuthSession)
        session = repo.find_active(command.access_token)
        if session is None:
            return
        session.revoke()
        repo.add(session)
        logger.info("account_signed_out", account_id=str(session.account_id))

    @handle(UpdateUserMetadata)
    def update_user_metadata(self, command):
        session = active_session(command.access_token)
        repo = current_domain.repository_for(Account)
        account = repo.get(session.account_id)
        account.update_metadata(json.loads(command.user_metadata))
        repo.add(account)
