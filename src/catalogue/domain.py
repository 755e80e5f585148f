"""Catalogue bounded context: the products table and everything read from it.

Admin CRUD on products, filtered product listings, and keyword-based
recommendations.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

catalogue = Domain(name="catalogue")
