"""FastAPI endpoints for the Catalogue domain."""

from typing import Literal

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddProductRequest,
    CategoryListResponse,
    ProductIdResponse,
    ProductListResponse,
    ProductResponse,
    RecommendationRequest,
    RecommendationResponse,
    StatusResponse,
    UpdateProductRequest,
)
from catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from catalogue.product.product import Product
from catalogue.recommendations import extract_keywords, recommend

product_router = APIRouter(prefix="/products", tags=["products"])
recommendation_router = APIRouter(prefix="/recommendations", tags=["recommendations"])

FEATURED_COUNT = 3


def _listing(products) -> ProductListResponse:
    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in products],
        count=len(products),
    )


# --- Read endpoints ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    q: str | None = None,
    category: str | None = None,
    sort: Literal["price-asc", "price-desc"] | None = None,
    limit: int | None = Query(None, ge=1),
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    return _listing(repo.browse(search=q, category=category, sort=sort, limit=limit))


@product_router.get("/featured", response_model=ProductListResponse)
async def featured_products(
    category: str | None = None,
    sort: Literal["price-asc", "price-desc"] | None = None,
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    return _listing(repo.browse(category=category, sort=sort, limit=FEATURED_COUNT))


@product_router.get("/categories", response_model=CategoryListResponse)
async def list_categories() -> CategoryListResponse:
    return CategoryListResponse(categories=current_domain.repository_for(Product).categories())


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


# --- Admin endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        price=body.price,
        description=body.description,
        image_url=body.image_url,
        category=body.category,
        brand=body.brand,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> StatusResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        price=body.price,
        description=body.description,
        image_url=body.image_url,
        category=body.category,
        brand=body.brand,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# --- Recommendations ---


@recommendation_router.post("", response_model=RecommendationResponse)
async def recommend_products(body: RecommendationRequest) -> RecommendationResponse:
    products = current_domain.repository_for(Product).list_all()
    picks = recommend(products, text=body.text, category=body.category)
    return RecommendationResponse(
        keywords=extract_keywords(body.text),
        products=[ProductResponse.from_product(p) for p in picks],
    )
