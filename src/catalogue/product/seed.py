"""Starter catalogue loaded by `manage.py seed-catalogue`."""

from protean.utils.globals import current_domain

from catalogue.domain import logger
from catalogue.product.management import AddProduct

INITIAL_PRODUCTS = [
    {
        "name": "Running Pro Max",
        "price": 129.99,
        "image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff?q=80&w=2070&auto=format&fit=crop",
        "description": "Professional running shoes with advanced cushioning technology.",
        "category": "running",
        "brand": "Nike",
    },
    {
        "name": "Casual Comfort",
        "price": 79.99,
        "image_url": "https://images.unsplash.com/photo-1525966222134-fcfa99b8ae77?q=80&w=2098&auto=format&fit=crop",
        "description": "Everyday casual shoes for maximum comfort.",
        "category": "casual",
        "brand": "Adidas",
    },
    {
        "name": "Hiking Explorer",
        "price": 149.99,
        "image_url": "https://images.unsplash.com/photo-1606107557195-0e29a4b5b4aa?q=80&w=1964&auto=format&fit=crop",
        "description": "Durable hiking boots for all terrains.",
        "category": "hiking",
        "brand": "Columbia",
    },
    {
        "name": "Sport Elite",
        "price": 109.99,
        "image_url": "https://images.unsplash.com/photo-1608231387042-66d1773070a5?q=80&w=1974&auto=format&fit=crop",
        "description": "Versatile sports shoes for various activities.",
        "category": "sport",
        "brand": "Nike",
    },
    {
        "name": "Fashion Trend",
        "price": 89.99,
        "image_url": "https://images.unsplash.com/photo-1560769629-975ec94e6a86?q=80&w=1964&auto=format&fit=crop",
        "description": "Stylish shoes to keep up with the latest fashion trends.",
        "category": "fashion",
        "brand": "Puma",
    },
    {
        "name": "Work Classic",
        "price": 119.99,
        "image_url": "https://images.unsplash.com/photo-1605812860427-4024433a70fd?q=80&w=2035&auto=format&fit=crop",
        "description": "Classic work shoes combining style and comfort.",
        "category": "work",
        "brand": "Timberland",
    },
]


def seed_catalogue(products=None):
    """Add each product through the AddProduct command. Must run inside the catalogue context."""
    product_ids = []
    for data in products or INITIAL_PRODUCTS:
        product_ids.append(current_domain.process(AddProduct(**data), asynchronous=False))
    logger.info("catalogue_seeded", count=len(product_ids))
    return product_ids
