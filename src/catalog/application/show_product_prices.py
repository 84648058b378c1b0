"""Application service: Show Product Prices query."""

from __future__ import annotations

from catalog.application.dto import ProductPricesDTO
from catalog.domain.exceptions import ProductNotFoundException
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductPricesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductPricesDTO:
        pid = ProductId(product_id)
        product = self._product_repo.get_by_id(pid.value)
        if product is None:
            raise ProductNotFoundException(f"Product #{pid} not found")

        return ProductPricesDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            # Always derive from what is stored, never trust a cached value.
            unit_price=product.compute_unit_price(),
            unit_price_ratio=product.unit_price_ratio,
            unity=product.unity,
            ecotax=product.ecotax,
            tax_rules_group_id=product.tax_rules_group_id,
            on_sale=product.on_sale,
            wholesale_price=product.wholesale_price,
        )
