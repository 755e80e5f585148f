"""Catalogue domain API package."""

from catalogue.api.routes import product_router, recommendation_router

__all__ = ["product_router", "recommendation_router"]
