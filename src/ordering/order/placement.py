"""Order placement: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {"product_id", "quantity"} dicts


def _parse_lines(items):
    data = json.loads(items) if isinstance(items, str) else items
    if not isinstance(data, list):
        raise ValidationError({"items": ["Items must be a list"]})

    lines = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("product_id"):
            raise ValidationError({"items": ["Each item needs a product_id"]})
        lines.append((str(entry["product_id"]), entry.get("quantity", 1)))
    return lines


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(user_id=command.user_id, lines=_parse_lines(command.items))
        current_domain.repository_for(Order).add(order)
        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            line_items=len(order.line_items),
        )
        return str(order.id)
