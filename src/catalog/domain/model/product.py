"""Product entity.

Only the pricing side of a catalog product is modelled here. The entity
is a plain mutable record: handlers set attributes directly and tell the
repository which columns they touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.tax_rules_group import NONE_APPLIED

# Columns a price update may write. ``unit_price`` is accepted in a field
# set but never stored; it is rebuilt from price and unit_price_ratio.
PRICE_FIELDS = frozenset(
    {
        "price",
        "unit_price",
        "unit_price_ratio",
        "unity",
        "ecotax",
        "tax_rules_group_id",
        "on_sale",
        "wholesale_price",
    }
)


@dataclass
class Product:
    """A product in the catalog.

    ``unit_price`` is derived data: the durable value is
    ``unit_price_ratio`` (price divided by unit price).
    """

    id: int
    name: str
    price: Decimal = Decimal("0")
    unit_price: Decimal = Decimal("0")
    unit_price_ratio: Decimal = Decimal("0")
    unity: str = ""
    ecotax: Decimal = Decimal("0")
    tax_rules_group_id: int = NONE_APPLIED
    on_sale: bool = False
    wholesale_price: Decimal = Decimal("0")

    def compute_unit_price(self) -> Decimal:
        """Return the unit price implied by the current price and ratio."""
        if self.unit_price_ratio > 0:
            return self.price / self.unit_price_ratio
        return Decimal("0")
