"""Unit tests for ProductFieldValidator."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ProductConstraintCode, ProductConstraintException
from catalog.domain.model.product import Product
from catalog.domain.service.field_validator import (
    ProductFieldValidator,
    is_price,
    is_unsigned_id,
)


class TestIsPrice:

    @pytest.mark.parametrize(
        "value",
        ["0", "10.00", "9999999999.999999999", "1.500000000000"],
    )
    def test_valid(self, value):
        assert is_price(Decimal(value))

    @pytest.mark.parametrize("value", ["-0.01", "12345678901", "0.0000000001"])
    def test_invalid(self, value):
        assert not is_price(Decimal(value))

    def test_float_is_not_a_price(self):
        assert not is_price(1.5)


class TestIsUnsignedId:

    def test_bounds(self):
        assert is_unsigned_id(0)
        assert is_unsigned_id(2**32 - 1)
        assert not is_unsigned_id(2**32)
        assert not is_unsigned_id(-1)

    def test_bool_rejected(self):
        assert not is_unsigned_id(True)


class TestProductFieldValidator:

    def test_valid_value_passes(self):
        product = Product(id=1, name="Tea", price=Decimal("3.20"))
        ProductFieldValidator().validate(
            product, "price", ProductConstraintCode.INVALID_PRICE
        )

    def test_invalid_value_raises_given_code(self):
        product = Product(id=1, name="Tea", wholesale_price=Decimal("-1"))

        with pytest.raises(ProductConstraintException, match="wholesale_price") as exc_info:
            ProductFieldValidator().validate(
                product, "wholesale_price", ProductConstraintCode.INVALID_WHOLESALE_PRICE
            )
        assert exc_info.value.code is ProductConstraintCode.INVALID_WHOLESALE_PRICE

    def test_unknown_field_is_a_programming_error(self):
        product = Product(id=1, name="Tea")

        with pytest.raises(ValueError, match="No validation rule"):
            ProductFieldValidator().validate(
                product, "name", ProductConstraintCode.INVALID_NAME
            )
