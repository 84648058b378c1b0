"""Application service: Update Product Prices use case.

Applies a partial update of the pricing fields of one product. Only the
fields present in the command are touched, and the repository is told
exactly which columns changed so a partially loaded record never
overwrites columns nobody asked to change.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from catalog.application.dto import UpdateProductPricesCommand
from catalog.domain.exceptions import (
    CannotUpdateProductCode,
    CannotUpdateProductException,
    DataStoreError,
    ProductConstraintCode,
    ProductConstraintException,
    ProductException,
    ProductNotFoundException,
)
from catalog.domain.model.product import Product
from catalog.domain.model.tax_rules_group import NONE_APPLIED
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.tax_rules_group_repository import (
    TaxRulesGroupRepository,
)
from catalog.domain.service.field_validator import ProductFieldValidator, is_price
from catalog.domain.service.number_extractor import NumberExtractor

logger = logging.getLogger(__name__)

# unit_price_ratio is stored as DECIMAL(20, 6).
UNIT_PRICE_RATIO_PLACES = Decimal("0.000001")


class UpdateProductPricesHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        tax_rules_group_repo: TaxRulesGroupRepository,
        number_extractor: NumberExtractor | None = None,
        field_validator: ProductFieldValidator | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._tax_rules_group_repo = tax_rules_group_repo
        self._number_extractor = number_extractor or NumberExtractor()
        self._field_validator = field_validator or ProductFieldValidator()

    def handle(self, command: UpdateProductPricesCommand) -> None:
        """Apply the provided pricing fields and persist them if any changed."""
        product_id = command.product_id.value
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(f"Product #{product_id} not found")

        fields = self._fill_updatable_fields(product, command)
        if not fields:
            logger.debug("Nothing to update for product #%s prices", product_id)
            return

        self._perform_update(product, fields)

    def _fill_updatable_fields(
        self, product: Product, command: UpdateProductPricesCommand
    ) -> set[str]:
        """Copy provided command values onto the product, validating each.

        Returns the names of the fields that were set.
        """
        fields: set[str] = set()

        if command.price is not None:
            product.price = command.price
            self._field_validator.validate(
                product, "price", ProductConstraintCode.INVALID_PRICE
            )
            fields.add("price")

        if command.unit_price is not None:
            fields |= self._set_unit_price_info(product, command.unit_price, command.price)

        if command.unity is not None:
            product.unity = command.unity
            fields.add("unity")

        if command.ecotax is not None:
            product.ecotax = command.ecotax
            self._field_validator.validate(
                product, "ecotax", ProductConstraintCode.INVALID_ECOTAX
            )
            fields.add("ecotax")

        if command.tax_rules_group_id is not None:
            product.tax_rules_group_id = command.tax_rules_group_id
            self._field_validator.validate(
                product,
                "tax_rules_group_id",
                ProductConstraintCode.INVALID_TAX_RULES_GROUP_ID,
            )
            self._assert_tax_rules_group_exists(command.tax_rules_group_id)
            fields.add("tax_rules_group_id")

        if command.on_sale is not None:
            product.on_sale = command.on_sale
            fields.add("on_sale")

        if command.wholesale_price is not None:
            product.wholesale_price = command.wholesale_price
            self._field_validator.validate(
                product, "wholesale_price", ProductConstraintCode.INVALID_WHOLESALE_PRICE
            )
            fields.add("wholesale_price")

        logger.debug("Staged fields for product #%s: %s", product.id, sorted(fields))
        return fields

    def _set_unit_price_info(
        self, product: Product, unit_price: Decimal, price: Decimal | None
    ) -> set[str]:
        if unit_price < 0:
            raise ProductConstraintException(
                f'Invalid product unit_price. Got "{unit_price}"',
                ProductConstraintCode.INVALID_UNIT_PRICE,
            )

        # A zero unit price means "no unit price": leave the ratio alone.
        if unit_price == 0:
            return set()

        if not is_price(unit_price):
            raise ProductConstraintException(
                f'Invalid product unit_price. Got "{unit_price}"',
                ProductConstraintCode.INVALID_UNIT_PRICE,
            )

        if price is None:
            price = self._number_extractor.extract(product, "price")

        if price == 0:
            raise ProductConstraintException(
                "Cannot set unit price when product price is 0",
                ProductConstraintCode.INVALID_UNIT_PRICE,
            )

        try:
            with localcontext() as ctx:
                ctx.prec = 50
                ratio = (price / unit_price).quantize(
                    UNIT_PRICE_RATIO_PLACES, rounding=ROUND_HALF_UP
                )
        except InvalidOperation as exc:
            raise ProductConstraintException(
                f"Unit price ratio of {price} / {unit_price} does not fit the ratio column",
                ProductConstraintCode.INVALID_UNIT_PRICE,
            ) from exc

        if ratio == 0:
            raise ProductConstraintException(
                f"Unit price {unit_price} is too large for product price {price}",
                ProductConstraintCode.INVALID_UNIT_PRICE,
            )

        product.unit_price_ratio = ratio
        # Not stored; rebuilt from price and unit_price_ratio on load.
        product.unit_price = unit_price

        return {"unit_price_ratio", "unit_price"}

    def _assert_tax_rules_group_exists(self, tax_rules_group_id: int) -> None:
        if tax_rules_group_id == NONE_APPLIED:
            return

        try:
            group = self._tax_rules_group_repo.get_by_id(tax_rules_group_id)
        except DataStoreError as exc:
            raise ProductException(
                f"Error occurred when trying to load tax rules group "
                f"#{tax_rules_group_id} for product"
            ) from exc

        if group is None:
            raise ProductConstraintException(
                f'Invalid tax rules group id "{tax_rules_group_id}". '
                f"Group doesn't exist",
                ProductConstraintCode.INVALID_TAX_RULES_GROUP_ID,
            )

    def _perform_update(self, product: Product, fields: set[str]) -> None:
        try:
            updated = self._product_repo.update(product, frozenset(fields))
        except DataStoreError as exc:
            logger.warning("Storage error while updating product #%s prices", product.id)
            raise CannotUpdateProductException(
                f"Error occurred when trying to update product #{product.id} prices",
                CannotUpdateProductCode.FAILED_UPDATE_PRICES,
            ) from exc

        if not updated:
            logger.warning("Product #%s prices were not written", product.id)
            raise CannotUpdateProductException(
                f"Failed to update product #{product.id} prices",
                CannotUpdateProductCode.FAILED_UPDATE_PRICES,
            )

        logger.info("Updated product #%s prices: %s", product.id, sorted(fields))
