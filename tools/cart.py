"""Function tools for the cart manager agent.

The cart travels through the conversation as a JSON string
(``{"items": [{"product_id": ..., "quantity": ...}]}``) so the tools stay
stateless.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError

from tools.products import get_product
from utils.helpers import to_json


class CartItem(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class Cart(BaseModel):
    items: List[CartItem] = Field(default_factory=list)


def _load_cart(cart_json: str) -> Dict[str, Any]:
    """Parse and validate the cart; raises ValidationError for anything that is not a cart."""
    if not cart_json or not cart_json.strip():
        return {"items": []}
    return Cart.model_validate_json(cart_json).model_dump()


def _with_total(cart: Dict[str, Any]) -> Dict[str, Any]:
    total = 0.0
    for item in cart["items"]:
        product = get_product(item["product_id"])
        if product:
            total += product.price * item["quantity"]
    cart["total"] = round(total, 2)
    return cart


def add_to_cart(cart_json: str, product_id: str, quantity: int = 1) -> str:
    """
    Add a product to the cart.

    :param cart_json: Current cart as JSON, or an empty string for a new cart.
    :param product_id: Catalogue id of the product to add.
    :param quantity: Number of units to add.
    :return: The updated cart as JSON, including its total.
    """
    if quantity < 1:
        return to_json({"error": "quantity must be at least 1"})
    product = get_product(product_id)
    if product is None:
        return to_json({"error": f"unknown product {product_id}"})
    try:
        cart = _load_cart(cart_json)
    except ValidationError:
        return to_json({"error": "cart_json is not a valid cart"})

    for item in cart["items"]:
        if item["product_id"] == product.id:
            item["quantity"] += quantity
            break
    else:
        cart["items"].append({"product_id": product.id, "quantity": quantity})
    return to_json(_with_total(cart))


def remove_from_cart(cart_json: str, product_id: str) -> str:
    """
    Remove a product from the cart entirely.

    :param cart_json: Current cart as JSON.
    :param product_id: Catalogue id of the product to remove.
    :return: The updated cart as JSON, including its total.
    """
    try:
        cart = _load_cart(cart_json)
    except ValidationError:
        return to_json({"error": "cart_json is not a valid cart"})

    wanted = product_id.strip().upper()
    cart["items"] = [i for i in cart["items"] if i["product_id"] != wanted]
    return to_json(_with_total(cart))
