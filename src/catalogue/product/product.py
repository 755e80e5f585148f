"""Product aggregate root: one row of the products table."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from catalogue.domain import catalogue

# Fields an admin may change through UpdateProduct
EDITABLE_FIELDS = ("name", "description", "price", "image_url", "category", "brand")


@catalogue.aggregate
class Product:
    """A shoe listed in the store.

    Products are read-only for shoppers; only admin commands create, edit or
    remove them. Category and brand are free-form labels used for filtering.
    """

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500)
    category: String(max_length=100)
    brand: String(max_length=100)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Product name cannot be blank"]})

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        description=None,
        image_url=None,
        category=None,
        brand=None,
    ):
        from catalogue.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=name,
            price=price,
            description=description,
            image_url=image_url,
            category=category,
            brand=brand,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                price=price,
                category=category,
                brand=brand,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update. Keys left out (or None) keep their value."""
        from catalogue.product.events import ProductPriceChanged, ProductUpdated

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError({"product": [f"Unknown product fields: {', '.join(sorted(unknown))}"]})

        previous_price = self.price
        for field_name, value in changes.items():
            if value is not None:
                setattr(self, field_name, value)

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                category=self.category,
                brand=self.brand,
            )
        )
        if self.price != previous_price:
            self.raise_(
                ProductPriceChanged(
                    product_id=self.id,
                    previous_price=previous_price,
                    new_price=self.price,
                )
            )
