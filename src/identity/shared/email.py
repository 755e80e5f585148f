"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from identity.domain import identity

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _invalid(email):
    return ValidationError({"email": [f"Unable to validate email address: invalid format ({email!r})"]})


@identity.value_object
class EmailAddress:
    """A validated email address.

    Enforces structural validity: exactly one @, non-empty local and domain
    parts, a dotted domain, no whitespace, no consecutive dots and no
    forbidden characters.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise _invalid(email)

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise _invalid(email)

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise _invalid(email)

        if "." not in domain_part:
            raise _invalid(email)

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                raise _invalid(email)

        if ".." in email:
            raise _invalid(email)

        if any(forbidden in email for forbidden in _FORBIDDEN):
            raise _invalid(email)

    @classmethod
    def normalized(cls, address):
        """Lower-cased, trimmed and validated."""
        return cls(address=(address or "").strip().lower())
