"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A signed-in user checked out their cart."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    line_item_count = Integer(required=True)
    total_quantity = Integer(required=True)
    placed_at = DateTime(required=True)
