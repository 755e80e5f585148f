"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "items": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 2}],
                }
            ]
        }
    }

    user_id: str
    items: list[OrderLineSchema]


# --- Response Schemas ---


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    status: str
    created_at: datetime | None = None
    items: list[OrderLineSchema]

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            order_id=str(order.id),
            user_id=str(order.user_id),
            status=order.status,
            created_at=order.created_at,
            items=[
                OrderLineSchema(product_id=str(item.product_id), quantity=item.quantity) for item in order.line_items
            ],
        )


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
    count: int


class OrderIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"order_id": "c3d4e5f6-a7b8-9012-cdef-123456789012"}]}}

    order_id: str
