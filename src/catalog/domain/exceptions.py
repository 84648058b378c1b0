"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Product errors carry a machine-readable code next to the message so callers
can map a failure back to the offending form field.
"""

from __future__ import annotations

from enum import Enum


class ProductConstraintCode(Enum):
    INVALID_ID = "invalid_id"
    INVALID_NAME = "invalid_name"
    INVALID_PRICE = "invalid_price"
    INVALID_UNIT_PRICE = "invalid_unit_price"
    INVALID_ECOTAX = "invalid_ecotax"
    INVALID_TAX_RULES_GROUP_ID = "invalid_tax_rules_group_id"
    INVALID_WHOLESALE_PRICE = "invalid_wholesale_price"


class CannotUpdateProductCode(Enum):
    FAILED_ADD = "failed_add"
    FAILED_UPDATE_PRICES = "failed_update_prices"


class DomainException(Exception):
    """Base class for all domain errors."""


class ProductException(DomainException):
    """Something went wrong while working with a product."""

    def __init__(self, message: str, code: Enum | None = None) -> None:
        super().__init__(message)
        self.code = code


class ProductConstraintException(ProductException):
    """A product field holds a value that breaks its constraints."""

    def __init__(self, message: str, code: ProductConstraintCode) -> None:
        super().__init__(message, code)


class ProductNotFoundException(ProductException):
    """The requested product does not exist."""


class CannotUpdateProductException(ProductException):
    """The product could not be written to the data store."""

    def __init__(self, message: str, code: CannotUpdateProductCode) -> None:
        super().__init__(message, code)


class TaxRulesGroupException(DomainException):
    """A tax rules group could not be created or read."""


class NumberExtractorException(DomainException):
    """A numeric value could not be read from an object."""


class DataStoreError(Exception):
    """Low-level storage failure (I/O, corrupt data).

    Deliberately not a DomainException: handlers translate it into the
    product error that fits the operation being performed.
    """
