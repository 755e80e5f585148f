"""FastAPI routes for the Ordering domain."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.api.schemas import OrderIdResponse, OrderListResponse, OrderResponse, PlaceOrderRequest
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        user_id=body.user_id,
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=OrderListResponse)
async def list_orders(user_id: str) -> OrderListResponse:
    orders = current_domain.repository_for(Order).orders_for_user(user_id)
    return OrderListResponse(orders=[OrderResponse.from_order(o) for o in orders], count=len(orders))


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return OrderResponse.from_order(current_domain.repository_for(Order).get(order_id))
