"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.domain.exceptions import (
    CannotUpdateProductCode,
    CannotUpdateProductException,
    DataStoreError,
    ProductConstraintCode,
    ProductConstraintException,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import decimal_of
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.field_validator import ProductFieldValidator


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._field_validator = ProductFieldValidator()

    def handle(self, name: str, price: str) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ProductConstraintException(
                "Product name is required", ProductConstraintCode.INVALID_NAME
            )

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=decimal_of(price, ProductConstraintCode.INVALID_PRICE),
        )
        self._field_validator.validate(
            product, "price", ProductConstraintCode.INVALID_PRICE
        )

        try:
            self._product_repo.add(product)
        except DataStoreError as exc:
            raise CannotUpdateProductException(
                f"Failed to add product '{product.name}'",
                CannotUpdateProductCode.FAILED_ADD,
            ) from exc
        return product
