"""Admin product management: add, update and remove products."""

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500)
    category: String(max_length=100)
    brand: String(max_length=100)


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    image_url: String(max_length=500)
    category: String(max_length=100)
    brand: String(max_length=100)


@catalogue.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            price=command.price,
            description=command.description,
            image_url=command.image_url,
            category=command.category,
            brand=command.brand,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            category=command.category,
            brand=command.brand,
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_removed", product_id=str(command.product_id))
