"""Abstract repository for TaxRulesGroup."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.tax_rules_group import TaxRulesGroup


class TaxRulesGroupRepository(ABC):

    @abstractmethod
    def get_by_id(self, group_id: int) -> TaxRulesGroup | None:
        """Return a group by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[TaxRulesGroup]:
        """Return every known group."""

    @abstractmethod
    def add(self, group: TaxRulesGroup) -> None:
        """Persist a new group."""
