"""JSON-file-backed implementation of TaxRulesGroupRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import DataStoreError
from catalog.domain.model.tax_rules_group import TaxRulesGroup
from catalog.domain.repository.tax_rules_group_repository import (
    TaxRulesGroupRepository,
)


class JsonTaxRulesGroupRepository(TaxRulesGroupRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, group_id: int) -> TaxRulesGroup | None:
        return self._load().get(group_id)

    def list_all(self) -> list[TaxRulesGroup]:
        return list(self._load().values())

    def add(self, group: TaxRulesGroup) -> None:
        groups = self._load()
        groups[group.id] = group
        self._persist(groups)

    def _load(self) -> dict[int, TaxRulesGroup]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                int(item["id"]): TaxRulesGroup(
                    id=int(item["id"]),
                    name=item["name"],
                    active=bool(item.get("active", True)),
                )
                for item in raw
            }
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise DataStoreError(f"Cannot read {self._file_path}") from exc

    def _persist(self, groups: dict[int, TaxRulesGroup]) -> None:
        raw = [
            {"id": g.id, "name": g.name, "active": g.active}
            for g in groups.values()
        ]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise DataStoreError(f"Cannot write {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
