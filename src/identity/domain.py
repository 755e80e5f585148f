"""Identity bounded context: authentication and user profiles.

Plays the role of the hosted auth provider: accounts with hashed passwords,
access-token sessions, user metadata, and the profiles table.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

identity = Domain(name="identity")
