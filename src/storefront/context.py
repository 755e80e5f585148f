"""Entering a domain on behalf of the storefront."""

from contextlib import contextmanager

from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.errors import RemoteRequestFailed


def flatten_messages(messages) -> str:
    """Join a ValidationError's field messages into one line."""
    if isinstance(messages, dict):
        parts = []
        for value in messages.values():
            parts.extend(value if isinstance(value, list | tuple) else [value])
        return "; ".join(str(part) for part in parts)
    return str(messages)


@contextmanager
def remote_call(domain):
    """Run the block inside `domain`'s context, reporting domain failures as RemoteRequestFailed."""
    try:
        with domain.domain_context():
            yield
    except ValidationError as exc:
        raise RemoteRequestFailed(flatten_messages(exc.messages)) from exc
    except ObjectNotFoundError as exc:
        raise RemoteRequestFailed(flatten_messages(getattr(exc, "messages", str(exc)))) from exc
