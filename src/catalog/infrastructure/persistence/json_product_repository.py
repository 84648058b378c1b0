"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from catalog.domain.exceptions import DataStoreError
from catalog.domain.model.product import PRICE_FIELDS, Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

_DECIMAL_COLUMNS = ("price", "unit_price_ratio", "ecotax", "wholesale_price")

# unit_price is derived at load time and never written.
_STORED_PRICE_COLUMNS = PRICE_FIELDS - {"unit_price"}


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for record in self._load():
            if record.get("id") == product_id:
                return self._to_product(record)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_product(record) for record in self._load()]

    def next_id(self) -> int:
        try:
            return max((int(record["id"]) for record in self._load()), default=0) + 1
        except (KeyError, TypeError, ValueError) as exc:
            raise DataStoreError(f"Corrupt product record in {self._file_path}") from exc

    def add(self, product: Product) -> None:
        records = self._load()
        records.append(self._to_record(product))
        self._persist(records)

    def update(self, product: Product, fields: Iterable[str]) -> bool:
        columns = set(fields)
        unknown = columns - PRICE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update unknown product columns: {sorted(unknown)}")

        records = self._load()
        for record in records:
            if record.get("id") == product.id:
                break
        else:
            logger.warning("Product #%s vanished before update", product.id)
            return False

        fresh = self._to_record(product)
        for column in columns & _STORED_PRICE_COLUMNS:
            record[column] = fresh[column]
        self._persist(records)
        return True

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_product(record: dict[str, Any]) -> Product:
        try:
            product = Product(
                id=int(record["id"]),
                name=record["name"],
                unity=record.get("unity", ""),
                tax_rules_group_id=int(record.get("tax_rules_group_id", 0)),
                on_sale=bool(record.get("on_sale", False)),
                **{
                    column: Decimal(record.get(column, "0"))
                    for column in _DECIMAL_COLUMNS
                },
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise DataStoreError(f"Corrupt product record: {record!r}") from exc
        product.unit_price = product.compute_unit_price()
        return product

    @staticmethod
    def _to_record(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price),
            "unit_price_ratio": str(product.unit_price_ratio),
            "unity": product.unity,
            "ecotax": str(product.ecotax),
            "tax_rules_group_id": product.tax_rules_group_id,
            "on_sale": product.on_sale,
            "wholesale_price": str(product.wholesale_price),
        }

    def _load(self) -> list[dict[str, Any]]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DataStoreError(f"Cannot read {self._file_path}") from exc

    def _persist(self, records: list[dict[str, Any]]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise DataStoreError(f"Cannot write {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
