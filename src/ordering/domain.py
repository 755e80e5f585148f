"""Ordering bounded context: orders and their line items.

An order and its line items are written in a single unit of work, so a
checkout never leaves an order without items behind.
"""

import structlog
from protean.domain import Domain
from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
