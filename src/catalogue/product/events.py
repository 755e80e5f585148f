"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue by an admin."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category: String()
    brand: String()
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """A product's details were edited."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String()
    brand: String()


@catalogue.event(part_of="Product")
class ProductPriceChanged:
    """A product's price was changed as part of an edit."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
