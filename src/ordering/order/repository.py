"""Order reads beyond get-by-id."""

from ordering.domain import ordering
from ordering.order.order import Order

MAX_ROWS = 1000


@ordering.repository(part_of=Order)
class OrderRepository:
    def orders_for_user(self, user_id) -> list[Order]:
        """A user's orders, newest first."""
        orders = self._dao.query.filter(user_id=str(user_id)).limit(MAX_ROWS).all().items
        return sorted(orders, key=lambda o: o.created_at, reverse=True)
