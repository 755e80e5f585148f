"""Checkout Sequencer: turns the cart into an order for the signed-in user."""

import structlog

from storefront.errors import EmptyCart, OperationResult, StorefrontError, Unauthenticated, UnexpectedError

logger = structlog.get_logger(__name__)


class CheckoutSequencer:
    """Places the cart as an order.

    Preconditions are checked in order: a signed-in identity, then a
    non-empty cart. The order and its line items are created by a single
    remote call; the cart is cleared only once that call succeeds.
    """

    def __init__(self, cart, session, remote):
        self.cart = cart
        self.session = session
        self.remote = remote

    def checkout(self) -> OperationResult:
        try:
            order_id = self._place_order()
        except StorefrontError as exc:
            logger.warning("checkout_failed", reason=exc.reason, error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("checkout_crashed")
            return OperationResult.failed(UnexpectedError())

        self.cart.clear_cart()
        logger.info("checkout_completed", order_id=order_id)
        return OperationResult.ok(order_id=order_id)

    def _place_order(self) -> str:
        user = self.session.user
        if user is None:
            raise Unauthenticated()
        if not self.cart.items:
            raise EmptyCart()

        lines = [(item.product_id, item.quantity) for item in self.cart.items]
        return self.remote.place_order(user.id, lines)
