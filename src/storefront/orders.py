"""Order history for the signed-in user."""

import structlog

from storefront.errors import OperationResult, StorefrontError, Unauthenticated, UnexpectedError
from storefront.records import OrderRecord

logger = structlog.get_logger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load orders. Please try again."


class OrderHistory:
    """The user's orders, newest first, each with its items joined to products."""

    def __init__(self, session, remote):
        self.session = session
        self.remote = remote
        self.orders: list[OrderRecord] = []

    def load(self) -> OperationResult:
        if self.session.user is None:
            return OperationResult.failed(Unauthenticated("Not authenticated"))

        try:
            self.orders = self.remote.fetch_orders(self.session.user.id)
        except StorefrontError as exc:
            logger.error("order_history_failed", user_id=self.session.user.id, error=exc.message)
            return OperationResult(success=False, error=LOAD_FAILED_MESSAGE, reason=exc.reason)
        except Exception:
            logger.exception("order_history_crashed", user_id=self.session.user.id)
            return OperationResult(success=False, error=LOAD_FAILED_MESSAGE, reason=UnexpectedError.reason)
        return OperationResult.ok()
