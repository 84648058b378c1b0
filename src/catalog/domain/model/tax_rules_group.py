"""Tax rules group entity."""

from __future__ import annotations

from dataclasses import dataclass

# Reserved id meaning "no tax rules group assigned".
NONE_APPLIED = 0


@dataclass
class TaxRulesGroup:

    id: int
    name: str
    active: bool = True
