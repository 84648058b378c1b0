"""Reads numeric properties off arbitrary objects as exact decimals."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import NumberExtractorException


class NumberExtractor:

    def extract(self, obj: object, field_name: str) -> Decimal:
        """Return ``obj.<field_name>`` as a Decimal.

        Values are converted through their string form so a float read
        from storage keeps its shortest repr instead of its binary noise.
        """
        if not hasattr(obj, field_name):
            raise NumberExtractorException(
                f"{type(obj).__name__} has no property '{field_name}'"
            )
        raw = getattr(obj, field_name)
        if isinstance(raw, Decimal):
            return raw
        if raw is None or isinstance(raw, bool):
            raise NumberExtractorException(
                f"Property '{field_name}' is not numeric: {raw!r}"
            )
        try:
            return Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise NumberExtractorException(
                f"Property '{field_name}' is not numeric: {raw!r}"
            ) from exc
