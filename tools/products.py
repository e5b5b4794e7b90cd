"""In-memory product catalogue shared by the retail function tools."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product the store sells."""

    id: str
    name: str
    category: str
    price: float = Field(..., ge=0)
    stock: int = Field(default=0, ge=0)
    rooms: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)


PRODUCTS: Dict[str, Product] = {
    p.id: p
    for p in [
        Product(id="PNT-001", name="Matte Interior Paint - Sage Green", category="Paint",
                price=38.99, stock=42, rooms=["living room", "bedroom"], styles=["modern", "scandinavian"]),
        Product(id="PNT-002", name="Eggshell Interior Paint - Warm White", category="Paint",
                price=36.49, stock=0, rooms=["kitchen", "living room"], styles=["farmhouse", "modern"]),
        Product(id="PNT-003", name="Semi-Gloss Trim Paint - Charcoal", category="Paint",
                price=41.00, stock=12, rooms=["bathroom", "kitchen"], styles=["industrial"]),
        Product(id="BRS-001", name="Angled Sash Brush 2in", category="Tools",
                price=9.99, stock=120, rooms=[], styles=[]),
        Product(id="RLR-001", name="Microfiber Roller Kit", category="Tools",
                price=19.99, stock=35, rooms=[], styles=[]),
        Product(id="TAP-001", name="Painter's Tape 1.88in", category="Tools",
                price=6.49, stock=3, rooms=[], styles=[]),
        Product(id="LGT-001", name="Brass Pendant Light", category="Lighting",
                price=129.00, stock=7, rooms=["kitchen", "living room"], styles=["industrial", "farmhouse"]),
        Product(id="RUG-001", name="Wool Area Rug 5x8", category="Decor",
                price=249.00, stock=4, rooms=["living room", "bedroom"], styles=["scandinavian", "modern"]),
    ]
}

LOW_STOCK_THRESHOLD = 5


def get_product(product_id: str) -> Optional[Product]:
    return PRODUCTS.get(product_id.strip().upper())
