"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Running Pro Max",
                    "price": 129.99,
                    "description": "Professional running shoes with advanced cushioning technology.",
                    "image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff",
                    "category": "running",
                    "brand": "Nike",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    price: float = Field(..., gt=0)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=100)
    brand: str | None = Field(None, max_length=100)


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 119.99, "description": "Now with a wider toe box."}]}}

    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, gt=0)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=100)
    brand: str | None = Field(None, max_length=100)


class RecommendationRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"text": "I need comfortable running shoes for daily jogging", "category": "running"}]
        }
    }

    text: str = ""
    category: str | None = None


# --- Response Schemas ---


class ProductResponse(BaseModel):
    product_id: str
    name: str
    price: float
    description: str | None = None
    image_url: str | None = None
    category: str | None = None
    brand: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            price=product.price,
            description=product.description,
            image_url=product.image_url,
            category=product.category,
            brand=product.brand,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    count: int


class CategoryListResponse(BaseModel):
    categories: list[str]


class RecommendationResponse(BaseModel):
    keywords: list[str]
    products: list[ProductResponse]


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    product_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
