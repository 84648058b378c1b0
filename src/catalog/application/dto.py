"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry caller input into the application layer; DTOs carry
read-side data back out without exposing the entity itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import ProductConstraintCode
from catalog.domain.model.value_objects import ProductId, decimal_of


@dataclass(frozen=True)
class UpdateProductPricesCommand:
    """Input: a partial update of a product's pricing fields.

    Every field except ``product_id`` is optional and ``None`` means
    "leave unchanged". ``on_sale=False`` is a real value, not an omission.
    """

    product_id: ProductId
    price: Decimal | None = None
    unit_price: Decimal | None = None
    unity: str | None = None
    ecotax: Decimal | None = None
    tax_rules_group_id: int | None = None
    on_sale: bool | None = None
    wholesale_price: Decimal | None = None

    @staticmethod
    def of(
        product_id: int,
        price: str | int | Decimal | None = None,
        unit_price: str | int | Decimal | None = None,
        unity: str | None = None,
        ecotax: str | int | Decimal | None = None,
        tax_rules_group_id: int | None = None,
        on_sale: bool | None = None,
        wholesale_price: str | int | Decimal | None = None,
    ) -> UpdateProductPricesCommand:
        """Build a command from raw values, parsing decimals exactly."""
        return UpdateProductPricesCommand(
            product_id=ProductId(product_id),
            price=decimal_of(price, ProductConstraintCode.INVALID_PRICE),
            unit_price=decimal_of(unit_price, ProductConstraintCode.INVALID_UNIT_PRICE),
            unity=unity,
            ecotax=decimal_of(ecotax, ProductConstraintCode.INVALID_ECOTAX),
            tax_rules_group_id=tax_rules_group_id,
            on_sale=on_sale,
            wholesale_price=decimal_of(
                wholesale_price, ProductConstraintCode.INVALID_WHOLESALE_PRICE
            ),
        )


@dataclass(frozen=True)
class ProductPricesDTO:
    """Output: a product's pricing as displayed to the user."""

    id: int
    name: str
    price: Decimal
    unit_price: Decimal
    unit_price_ratio: Decimal
    unity: str
    ecotax: Decimal
    tax_rules_group_id: int
    on_sale: bool
    wholesale_price: Decimal
