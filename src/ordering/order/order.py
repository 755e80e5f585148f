"""Order aggregate root with its OrderLineItem entities.

An order is placed in one step: the order row and every line item are built
together and persisted in the same unit of work.
"""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.domain import ordering


class OrderStatus(Enum):
    PLACED = "Placed"


@ordering.entity(part_of="Order")
class OrderLineItem:
    """One product and quantity within an order."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@ordering.aggregate
class Order:
    """A purchase made by a signed-in user.

    Holds at least one line item, and never two line items for the same
    product. Prices are not captured; history is priced from the catalogue.
    """

    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    line_items = HasMany(OrderLineItem)
    created_at = DateTime(default=datetime.now)

    @invariant.post
    def product_appears_once(self):
        product_ids = [str(item.product_id) for item in self.line_items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"line_items": ["Each product can appear only once in an order"]})

    @classmethod
    def place(cls, user_id, lines):
        """Build an order for `user_id` from `(product_id, quantity)` pairs."""
        from ordering.order.events import OrderPlaced

        lines = list(lines)
        if not lines:
            raise ValidationError({"line_items": ["An order needs at least one line item"]})
        if len({str(pid) for pid, _ in lines}) != len(lines):
            raise ValidationError({"line_items": ["Each product can appear only once in an order"]})

        now = datetime.now()
        order = cls(user_id=user_id, created_at=now)
        order.add_line_items([OrderLineItem(product_id=pid, quantity=qty) for pid, qty in lines])

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                line_item_count=len(lines),
                total_quantity=sum(qty for _, qty in lines),
                placed_at=now,
            )
        )
        return order

    @property
    def total_quantity(self):
        return sum(item.quantity for item in self.line_items)
