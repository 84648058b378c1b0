"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ProductConstraintCode, ProductConstraintException


@dataclass(frozen=True)
class ProductId:
    """A positive integer product identifier."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ProductConstraintException(
                f"Product id must be an integer, got {type(self.value).__name__}",
                ProductConstraintCode.INVALID_ID,
            )
        if self.value <= 0:
            raise ProductConstraintException(
                f"Product id must be positive, got {self.value}",
                ProductConstraintCode.INVALID_ID,
            )

    def __str__(self) -> str:
        return str(self.value)


def decimal_of(
    value: str | int | Decimal | None,
    code: ProductConstraintCode,
) -> Decimal | None:
    """Coerce a user-supplied number to Decimal without going through float.

    ``None`` passes through untouched: it means "not provided".
    """
    if value is None:
        return None
    if isinstance(value, bool) or isinstance(value, float):
        raise ProductConstraintException(
            f"Expected a decimal string, got {type(value).__name__} {value!r}", code
        )
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ProductConstraintException(
            f"Invalid decimal number: {value!r}", code
        ) from exc
    if not number.is_finite():
        raise ProductConstraintException(f"Invalid decimal number: {value!r}", code)
    return number
