"""Wires the storefront components together.

Nothing here is global: each `Storefront` owns its storage, gateway and
client-side state, and the caller decides when to start and stop it.
"""

from dataclasses import dataclass

import structlog

from storefront.admin import AdminCatalog
from storefront.cart import CartStateManager
from storefront.catalog import CatalogView
from storefront.checkout import CheckoutSequencer
from storefront.orders import OrderHistory
from storefront.remote import RemoteDataService
from storefront.session import SessionHolder
from storefront.storage import LocalStorage

logger = structlog.get_logger(__name__)


@dataclass
class Storefront:
    remote: RemoteDataService
    session: SessionHolder
    cart: CartStateManager
    checkout: CheckoutSequencer
    catalog: CatalogView
    orders: OrderHistory
    admin: AdminCatalog

    @classmethod
    def create(cls, catalogue, identity, ordering, storage=None, rng=None):
        """Build a storefront over initialized domains. Storage defaults to the local JSON file."""
        storage = storage if storage is not None else LocalStorage()
        remote = RemoteDataService(catalogue, identity, ordering, storage)
        session = SessionHolder(remote)
        cart = CartStateManager(remote, storage)
        return cls(
            remote=remote,
            session=session,
            cart=cart,
            checkout=CheckoutSequencer(cart, session, remote),
            catalog=CatalogView(remote, rng=rng),
            orders=OrderHistory(session, remote),
            admin=AdminCatalog(session, remote),
        )

    def start(self) -> None:
        """Restore the session and the persisted cart, then resolve cart products."""
        self.session.start()
        self.cart.load()
        self.cart.run_pending_enrichment()
        logger.info("storefront_started", authenticated=self.session.is_authenticated, cart_items=self.cart.item_count)

    def close(self) -> None:
        self.session.close()
