"""Generic per-field validation for Product.

Each rule looks only at the current value of one attribute. Handlers set
a value first and validate afterwards, passing the error code the caller
should see when the value is rejected.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from catalog.domain.exceptions import ProductConstraintCode, ProductConstraintException
from catalog.domain.model.product import Product

MAX_PRICE_INTEGER_DIGITS = 10
MAX_PRICE_DECIMAL_PLACES = 9
MAX_UNSIGNED_ID = 2**32 - 1
MAX_UNITY_LENGTH = 255


def is_price(value: object) -> bool:
    """Non-negative finite decimal fitting a DECIMAL(20, 9) column."""
    if not isinstance(value, Decimal) or not value.is_finite() or value < 0:
        return False
    # normalize() drops trailing zeros, so "10.000000000000" still fits.
    decimal_places = max(0, -value.normalize().as_tuple().exponent)
    if decimal_places > MAX_PRICE_DECIMAL_PLACES:
        return False
    return len(str(int(value))) <= MAX_PRICE_INTEGER_DIGITS


def is_unsigned_id(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= MAX_UNSIGNED_ID


def is_unity(value: object) -> bool:
    return isinstance(value, str) and len(value) <= MAX_UNITY_LENGTH


def is_bool(value: object) -> bool:
    return isinstance(value, bool)


class ProductFieldValidator:

    RULES: dict[str, Callable[[object], bool]] = {
        "price": is_price,
        "ecotax": is_price,
        "wholesale_price": is_price,
        "tax_rules_group_id": is_unsigned_id,
        "unity": is_unity,
        "on_sale": is_bool,
    }

    def validate(self, product: Product, field_name: str, code: ProductConstraintCode) -> None:
        """Raise ProductConstraintException(code) if the field value is invalid."""
        try:
            rule = self.RULES[field_name]
        except KeyError:
            raise ValueError(f"No validation rule for product field '{field_name}'")

        value = getattr(product, field_name)
        if not rule(value):
            raise ProductConstraintException(
                f"Invalid product {field_name}. Got {value!r}", code
            )
