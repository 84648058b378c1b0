"""Application service: Add Tax Rules Group use case."""

from __future__ import annotations

from catalog.domain.exceptions import DataStoreError, TaxRulesGroupException
from catalog.domain.model.tax_rules_group import TaxRulesGroup
from catalog.domain.repository.tax_rules_group_repository import (
    TaxRulesGroupRepository,
)


class AddTaxRulesGroupHandler:

    def __init__(self, tax_rules_group_repo: TaxRulesGroupRepository) -> None:
        self._tax_rules_group_repo = tax_rules_group_repo

    def handle(self, name: str) -> TaxRulesGroup:
        if not name or not name.strip():
            raise TaxRulesGroupException("Tax rules group name is required")

        existing = self._tax_rules_group_repo.list_all()
        if any(g.name.lower() == name.strip().lower() for g in existing):
            raise TaxRulesGroupException(f"Tax rules group '{name}' already exists")

        # Ids start at 1; 0 is reserved for "no group".
        group = TaxRulesGroup(
            id=max((g.id for g in existing), default=0) + 1,
            name=name.strip(),
        )
        try:
            self._tax_rules_group_repo.add(group)
        except DataStoreError as exc:
            raise TaxRulesGroupException(
                f"Failed to add tax rules group '{group.name}'"
            ) from exc
        return group
