"""Cart State Manager: the client-side shopping cart.

The cart is a list of line items persisted to local storage under the `cart`
key. Line items may carry a product snapshot for display and pricing; the
snapshots are (re)resolved by enrichment, a batched product read queued
whenever the set of product ids in the cart changes.

Enrichment requests are numbered by generation. Only the newest generation
is ever applied: queueing a request drops any older one still waiting, and a
response that arrives after a newer request was queued is discarded.
"""

import json
import time
from collections import deque
from dataclasses import dataclass

import structlog

from storefront.errors import StorefrontError
from storefront.records import CartLineItem, CartSummary, ProductRecord

logger = structlog.get_logger(__name__)

CART_KEY = "cart"

SHIPPING_FLAT_RATE = 10.0
TAX_RATE = 0.1


@dataclass(frozen=True)
class EnrichmentRequest:
    generation: int
    product_ids: tuple


class CartStateManager:
    def __init__(self, remote, storage, clock=time.time):
        self.remote = remote
        self.storage = storage
        self.clock = clock

        self.items: list[CartLineItem] = []
        self.is_loading = False

        self._generation = 0
        self._pending: deque[EnrichmentRequest] = deque()

    # --- Derived values ---

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def summary(self) -> CartSummary:
        """Subtotal plus a flat shipping rate (when non-empty) and tax on the subtotal."""
        subtotal = self.subtotal
        shipping = SHIPPING_FLAT_RATE if subtotal > 0 else 0.0
        tax = subtotal * TAX_RATE
        return CartSummary(subtotal=subtotal, shipping=shipping, tax=tax, total=subtotal + shipping + tax)

    @property
    def product_ids(self) -> tuple:
        return tuple(item.product_id for item in self.items)

    def find(self, product_id) -> CartLineItem | None:
        return next((item for item in self.items if item.product_id == str(product_id)), None)

    # --- Startup ---

    def load(self) -> None:
        """Re-hydrate the cart from storage. A corrupt snapshot leaves the cart empty."""
        raw = self.storage.get(CART_KEY)
        if not raw:
            return

        try:
            self.items = [CartLineItem.model_validate(entry) for entry in json.loads(raw)]
        except (ValueError, TypeError) as exc:
            logger.warning("cart_snapshot_corrupt", error=str(exc))
            self.items = []
            return

        logger.debug("cart_loaded", line_items=len(self.items))
        self._enqueue_enrichment()

    # --- Mutations ---

    def add_item(self, product, quantity=1) -> None:
        """Add `quantity` of a product, merging into an existing line item.

        `product` is either a ProductRecord, kept as the snapshot, or a bare
        product id left for enrichment to resolve. A quantity below one is
        ignored.
        """
        if quantity < 1:
            logger.warning("cart_add_ignored", quantity=quantity)
            return

        if isinstance(product, ProductRecord):
            product_id, snapshot = product.id, product
        else:
            product_id, snapshot = str(product), None

        existing = self.find(product_id)
        if existing is not None:
            existing.quantity += quantity
            self._persist()
            return

        self.items.append(
            CartLineItem(id=self._new_line_id(), product_id=product_id, quantity=quantity, product=snapshot)
        )
        self._persist()
        self._enqueue_enrichment()

    def remove_item(self, product_id) -> None:
        if self.find(product_id) is None:
            return
        self.items = [item for item in self.items if item.product_id != str(product_id)]
        self._persist()
        self._enqueue_enrichment()

    def update_quantity(self, product_id, quantity) -> None:
        """Set a line item's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove_item(product_id)
            return

        item = self.find(product_id)
        if item is None:
            return
        item.quantity = quantity
        self._persist()

    def clear_cart(self) -> None:
        self.items = []
        self.storage.remove(CART_KEY)
        self._enqueue_enrichment()

    # --- Enrichment ---

    @property
    def has_pending_enrichment(self) -> bool:
        return bool(self._pending)

    def run_pending_enrichment(self) -> None:
        """Drain queued enrichment requests, fetching only for the newest generation."""
        while self._pending:
            request = self._pending.popleft()
            if request.generation != self._generation:
                logger.debug("enrichment_superseded", generation=request.generation)
                continue
            self._enrich(request)

    def _enrich(self, request: EnrichmentRequest) -> None:
        self.is_loading = True
        try:
            products = self.remote.fetch_products(request.product_ids)
        except StorefrontError as exc:
            logger.error("enrichment_failed", generation=request.generation, error=exc.message)
            return
        except Exception:
            logger.exception("enrichment_crashed", generation=request.generation)
            return
        finally:
            self.is_loading = False

        if request.generation != self._generation:
            logger.debug("enrichment_response_stale", generation=request.generation, current=self._generation)
            return

        by_id = {product.id: product for product in products}
        for item in self.items:
            item.product = by_id.get(item.product_id)
        self._persist()

    def _enqueue_enrichment(self) -> None:
        # At most one request is pending: the one for the current generation
        self._generation += 1
        self._pending.clear()
        if self.items:
            self._pending.append(EnrichmentRequest(generation=self._generation, product_ids=self.product_ids))

    # --- Persistence ---

    def _persist(self) -> None:
        self.storage.set(CART_KEY, json.dumps([item.model_dump(mode="json") for item in self.items]))

    def _new_line_id(self) -> str:
        taken = {item.id for item in self.items}
        stamp = int(self.clock() * 1000)
        while f"temp-{stamp}" in taken:
            stamp += 1
        return f"temp-{stamp}"
