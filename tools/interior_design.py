"""Function tools for the interior design agent."""

from __future__ import annotations

from tools.products import PRODUCTS
from utils.helpers import to_json


def recommend_products(room: str, style: str = "") -> str:
    """
    Recommend products for a room, optionally filtered by design style.

    :param room: Room being decorated, e.g. "living room".
    :param style: Optional style, e.g. "modern" or "farmhouse".
    :return: JSON list of matching products that are currently in stock.
    """
    room = room.strip().lower()
    style = style.strip().lower()
    matches = [
        p for p in PRODUCTS.values()
        if room in p.rooms and (not style or style in p.styles) and p.stock > 0
    ]
    return to_json([
        {"product_id": p.id, "name": p.name, "category": p.category, "price": p.price}
        for p in matches
    ])
