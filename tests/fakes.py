"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

from catalog.domain.exceptions import DataStoreError
from catalog.domain.model.product import Product
from catalog.domain.model.tax_rules_group import TaxRulesGroup
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.tax_rules_group_repository import (
    TaxRulesGroupRepository,
)


class FakeProductRepository(ProductRepository):
    """Records every update call; can be told to fail writes."""

    def __init__(
        self,
        products: list[Product] | None = None,
        update_returns: bool = True,
        update_raises: Exception | None = None,
    ) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.update_returns = update_returns
        self.update_raises = update_raises
        self.updates: list[tuple[int, frozenset[str]]] = []

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def add(self, product: Product) -> None:
        self._store[product.id] = product

    def update(self, product: Product, fields: Iterable[str]) -> bool:
        self.updates.append((product.id, frozenset(fields)))
        if self.update_raises is not None:
            raise self.update_raises
        return self.update_returns


class FakeTaxRulesGroupRepository(TaxRulesGroupRepository):

    def __init__(
        self,
        groups: list[TaxRulesGroup] | None = None,
        broken: bool = False,
    ) -> None:
        self._store: dict[int, TaxRulesGroup] = {}
        for g in groups or []:
            self._store[g.id] = g
        self.broken = broken
        self.lookups: list[int] = []

    def get_by_id(self, group_id: int) -> TaxRulesGroup | None:
        self.lookups.append(group_id)
        if self.broken:
            raise DataStoreError("tax rules group table unavailable")
        return self._store.get(group_id)

    def list_all(self) -> list[TaxRulesGroup]:
        return list(self._store.values())

    def add(self, group: TaxRulesGroup) -> None:
        self._store[group.id] = group
