"""Client-side records exchanged with the remote data service.

These are plain pydantic models, detached from any domain context, so they
can be held in memory, serialized to local storage and handed to callers.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ProductRecord(BaseModel):
    id: str
    name: str
    price: float
    description: str | None = None
    image_url: str | None = None
    category: str | None = None
    brand: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductRecord:
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            description=product.description,
            image_url=product.image_url,
            category=product.category,
            brand=product.brand,
        )


class CartLineItem(BaseModel):
    """One product in the cart.

    `product` is a denormalized snapshot; it is None until enrichment has
    resolved the product, and such items count as zero in the subtotal.
    """

    model_config = {"validate_assignment": True}

    id: str
    product_id: str
    quantity: int = Field(..., ge=1)
    product: ProductRecord | None = None

    @property
    def line_total(self) -> float:
        if self.product is None:
            return 0.0
        return self.product.price * self.quantity


class CartSummary(BaseModel):
    subtotal: float
    shipping: float
    tax: float
    total: float


class OrderItemRecord(BaseModel):
    id: str
    product_id: str
    quantity: int
    product: ProductRecord | None = None


class OrderRecord(BaseModel):
    id: str
    user_id: str
    status: str
    created_at: datetime | None = None
    items: list[OrderItemRecord] = []

    @property
    def total(self) -> float:
        return sum(item.product.price * item.quantity for item in self.items if item.product is not None)


class ProfileRecord(BaseModel):
    id: str
    email: str
    name: str | None = None
    is_admin: bool = False
    avatar: str | None = None

    @classmethod
    def from_profile(cls, profile) -> ProfileRecord:
        return cls(
            id=str(profile.id),
            email=profile.email,
            name=profile.name,
            is_admin=bool(profile.is_admin),
            avatar=profile.avatar,
        )


class AuthUser(BaseModel):
    id: str
    email: str
    user_metadata: dict = {}

    @classmethod
    def from_account(cls, account) -> AuthUser:
        return cls(id=str(account.id), email=account.email, user_metadata=account.metadata)


class AuthSession(BaseModel):
    access_token: str
    user: AuthUser
