"""Keyword-based product recommendations.

A shopper describes what they want in free text ("comfortable running shoes
for daily jogging"). The words that appear in a fixed shoe vocabulary become
keywords, and products whose name or description contains any of them are
recommended. Works on anything with `name`, `description` and `category`
attributes, so both Product aggregates and client-side records can be fed in.
"""

import random

SHOE_KEYWORDS = (
    "running",
    "casual",
    "formal",
    "sports",
    "athletic",
    "walking",
    "hiking",
    "outdoor",
    "sneakers",
    "boots",
    "sandals",
    "comfortable",
    "leather",
    "canvas",
    "waterproof",
    "breathable",
    "lightweight",
    "durable",
    "stylish",
    "fashion",
    "trendy",
    "classic",
    "modern",
    "work",
    "office",
    "gym",
    "training",
    "jogging",
    "trail",
)

FALLBACK_SIZE = 3
HOME_PICKS_SIZE = 4

# Sentinel category meaning "no category filter"
ANY_CATEGORY = "any"


def extract_keywords(text):
    """Return the vocabulary words that occur (as substrings) in `text`."""
    if not text:
        return []
    lowered = text.lower()
    return [keyword for keyword in SHOE_KEYWORDS if keyword in lowered]


def matches_keywords(product, keywords):
    name = (product.name or "").lower()
    description = (product.description or "").lower()
    return any(keyword in name or keyword in description for keyword in keywords)


def recommend(products, text="", category=None, rng=None):
    """Recommend products for a free-text request and an optional category.

    With a category, products are narrowed to it first and keywords refine
    the result further. When nothing matches, the whole category is returned;
    failing that, `FALLBACK_SIZE` random products.
    """
    rng = rng or random
    products = list(products)
    if category == ANY_CATEGORY:
        category = None

    keywords = extract_keywords(text)
    matched = []

    if category:
        matched = [p for p in products if p.category == category]
        if keywords:
            matched = [p for p in matched if matches_keywords(p, keywords)]
    elif keywords:
        matched = [p for p in products if matches_keywords(p, keywords)]

    if not matched:
        if category:
            matched = [p for p in products if p.category == category]
        if not matched:
            matched = sample(products, FALLBACK_SIZE, rng=rng)

    return matched


def sample(products, size, rng=None):
    """Up to `size` products picked at random, without repeats."""
    rng = rng or random
    products = list(products)
    return rng.sample(products, min(size, len(products)))
