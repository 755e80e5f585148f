"""Catalog/Recommendation View: read-only product browsing for the storefront.

Each operation stores what it read on the view and returns an
OperationResult. A failed read leaves the previous value in place.
"""

import random

import structlog

from catalogue.recommendations import HOME_PICKS_SIZE, extract_keywords, recommend, sample
from storefront.errors import OperationResult, StorefrontError, UnexpectedError
from storefront.records import ProductRecord

logger = structlog.get_logger(__name__)

FEATURED_COUNT = 3


class CatalogView:
    def __init__(self, remote, rng=None):
        self.remote = remote
        self.rng = rng or random.Random()

        self.products: list[ProductRecord] = []
        self.featured: list[ProductRecord] = []
        self.categories: list[str] = []
        self.product: ProductRecord | None = None
        self.recommendations: list[ProductRecord] = []
        self.home_picks: list[ProductRecord] = []

    def _run(self, action, read) -> OperationResult:
        try:
            read()
        except StorefrontError as exc:
            logger.warning("catalog_read_failed", action=action, reason=exc.reason, error=exc.message)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("catalog_read_crashed", action=action)
            return OperationResult.failed(UnexpectedError())
        return OperationResult.ok()

    def browse(self, search=None, category=None, sort=None) -> OperationResult:
        """Name-ordered products, narrowed by search text and category, optionally sorted by price."""

        def _read():
            self.products = self.remote.browse_products(search=search, category=category, sort=sort)

        return self._run("browse", _read)

    def load_featured(self, limit=FEATURED_COUNT, category=None, sort=None) -> OperationResult:
        def _read():
            self.featured = self.remote.browse_products(category=category, sort=sort, limit=limit)

        return self._run("featured", _read)

    def load_categories(self) -> OperationResult:
        def _read():
            self.categories = self.remote.list_categories()

        return self._run("categories", _read)

    def open_product(self, product_id) -> OperationResult:
        def _read():
            self.product = self.remote.get_product(product_id)

        return self._run("product", _read)

    def recommend(self, text, category=None) -> OperationResult:
        def _read():
            picks = recommend(self.remote.list_products(), text=text, category=category, rng=self.rng)
            logger.debug("recommendations_made", keywords=extract_keywords(text), count=len(picks))
            self.recommendations = picks

        return self._run("recommend", _read)

    def load_home_picks(self, limit=HOME_PICKS_SIZE) -> OperationResult:
        def _read():
            self.home_picks = sample(self.remote.list_products(), limit, rng=self.rng)

        return self._run("home_picks", _read)
