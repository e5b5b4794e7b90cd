"""Function tools for the loyalty agent."""

from __future__ import annotations

from typing import Dict

from utils.helpers import to_json

# Tier thresholds on the cart total, highest first.
DISCOUNT_TIERS = [
    (500.0, 0.15),
    (200.0, 0.10),
    (50.0, 0.05),
]

# Members get an extra percentage on top of the cart tier.
MEMBER_BONUS: Dict[str, float] = {
    "gold": 0.05,
    "silver": 0.02,
}


def calculate_discount(cart_total: float, membership_tier: str = "") -> str:
    """
    Calculate the loyalty discount for a cart.

    :param cart_total: Cart total in dollars before discount.
    :param membership_tier: Optional membership tier ("gold", "silver").
    :return: JSON with the discount rate, discount amount and final total.
    """
    if cart_total < 0:
        return to_json({"error": "cart_total must not be negative"})

    rate = next((r for threshold, r in DISCOUNT_TIERS if cart_total >= threshold), 0.0)
    rate += MEMBER_BONUS.get(membership_tier.strip().lower(), 0.0)
    discount = round(cart_total * rate, 2)
    return to_json({
        "cart_total": round(cart_total, 2),
        "discount_rate": round(rate, 4),
        "discount": discount,
        "final_total": round(cart_total - discount, 2),
    })
