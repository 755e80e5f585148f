"""Application tests for order placement via domain.process()."""

import json

import pytest
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from protean import current_domain
from protean.exceptions import ValidationError


def _place_order(user_id="user-1", items=None):
    items = items if items is not None else [{"product_id": "prod-1", "quantity": 2}]
    command = PlaceOrder(user_id=user_id, items=json.dumps(items))
    return current_domain.process(command, asynchronous=False)


class TestPlaceOrderHandler:
    def test_place_order_persists_order_and_items(self):
        order_id = _place_order(items=[{"product_id": "prod-1", "quantity": 2}, {"product_id": "prod-2"}])

        order = current_domain.repository_for(Order).get(order_id)
        assert order.user_id == "user-1"
        assert sorted((i.product_id, i.quantity) for i in order.line_items) == [("prod-1", 2), ("prod-2", 1)]

    def test_empty_items_leave_no_order(self):
        with pytest.raises(ValidationError):
            _place_order(items=[])
        assert current_domain.repository_for(Order).orders_for_user("user-1") == []

    def test_invalid_quantity_leaves_no_order(self):
        with pytest.raises(ValidationError):
            _place_order(items=[{"product_id": "prod-1", "quantity": 1}, {"product_id": "prod-2", "quantity": 0}])
        assert current_domain.repository_for(Order).orders_for_user("user-1") == []

    def test_item_without_product_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _place_order(items=[{"quantity": 1}])
        assert "items" in exc.value.messages

    def test_items_must_be_a_list(self):
        with pytest.raises(ValidationError):
            current_domain.process(PlaceOrder(user_id="user-1", items=json.dumps({"a": 1})), asynchronous=False)

    def test_order_placed_event_is_stored(self):
        order_id = _place_order()
        messages = current_domain.event_store.store.read("ordering::order")
        placed = [
            m
            for m in messages
            if m.metadata.headers.type == "Ordering.OrderPlaced.v1" and m.data.get("order_id") == order_id
        ]
        assert len(placed) == 1


class TestOrderHistoryQuery:
    def test_orders_for_user_newest_first(self):
        first = _place_order()
        second = _place_order(items=[{"product_id": "prod-9", "quantity": 1}])
        _place_order(user_id="someone-else")

        orders = current_domain.repository_for(Order).orders_for_user("user-1")
        assert [str(o.id) for o in orders] == [second, first]

    def test_no_orders(self):
        assert current_domain.repository_for(Order).orders_for_user("user-1") == []
