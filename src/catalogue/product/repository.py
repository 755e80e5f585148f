"""Repository for the Product aggregate, the read side of the products table."""

from catalogue.domain import catalogue
from catalogue.product.product import Product

# Upper bound for a single listing; the catalogue is a few dozen products.
MAX_ROWS = 1000

SORT_ORDERS = ("price-asc", "price-desc")


@catalogue.repository(part_of=Product)
class ProductRepository:
    """Product reads beyond get-by-id.

    Listings are always returned ordered by name; callers narrow them with
    `browse` or fetch a batch with `find_by_ids`.
    """

    def list_all(self) -> list[Product]:
        products = self._dao.query.limit(MAX_ROWS).all().items
        return sorted(products, key=lambda p: p.name)

    def find_by_ids(self, product_ids) -> list[Product]:
        ids = [str(pid) for pid in product_ids]
        if not ids:
            return []
        return self._dao.query.filter(id__in=ids).limit(MAX_ROWS).all().items

    def browse(self, search=None, category=None, sort=None, limit=None) -> list[Product]:
        """Name-ordered listing, narrowed by search text and category, optionally re-sorted by price."""
        products = self.list_all()

        if category:
            products = [p for p in products if p.category == category]

        if search:
            needle = search.lower()
            products = [
                p for p in products if needle in p.name.lower() or needle in (p.description or "").lower()
            ]

        if sort == "price-asc":
            products = sorted(products, key=lambda p: p.price)
        elif sort == "price-desc":
            products = sorted(products, key=lambda p: p.price, reverse=True)

        if limit is not None:
            products = products[:limit]
        return products

    def categories(self) -> list[str]:
        seen = []
        for product in self.list_all():
            if product.category and product.category not in seen:
                seen.append(product.category)
        return seen
