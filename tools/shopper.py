"""Function tools for the shopper (front-of-store) agent."""

from __future__ import annotations

from tools.products import PRODUCTS
from utils.helpers import to_json


def search_products(query: str) -> str:
    """
    Search the catalogue by name or category.

    :param query: Free-text search, e.g. "paint" or "roller".
    :return: JSON list of matching products with price and stock.
    """
    terms = [t for t in query.lower().split() if t]
    if not terms:
        return to_json([])
    results = [
        {"product_id": p.id, "name": p.name, "price": p.price, "in_stock": p.stock > 0}
        for p in PRODUCTS.values()
        if all(t in f"{p.name} {p.category}".lower() for t in terms)
    ]
    return to_json(results)
