"""Function tools for the inventory agent."""

from __future__ import annotations

from tools.products import LOW_STOCK_THRESHOLD, get_product
from utils.helpers import to_json


def check_stock(product_id: str) -> str:
    """
    Look up the stock level of a product.

    :param product_id: Catalogue id, e.g. "PNT-001".
    :return: JSON with the product id, units in stock and a status of
        "in_stock", "low_stock" or "out_of_stock".
    """
    product = get_product(product_id)
    if product is None:
        return to_json({"product_id": product_id, "error": "unknown product"})

    if product.stock == 0:
        status = "out_of_stock"
    elif product.stock <= LOW_STOCK_THRESHOLD:
        status = "low_stock"
    else:
        status = "in_stock"
    return to_json({"product_id": product.id, "name": product.name, "stock": product.stock, "status": status})
