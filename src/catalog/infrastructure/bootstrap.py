"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_tax_rules_group_repository import (
    JsonTaxRulesGroupRepository,
)


@lru_cache
def settings() -> Settings:
    return Settings()


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def tax_rules_group_repository() -> JsonTaxRulesGroupRepository:
    return JsonTaxRulesGroupRepository(settings().data_dir / "tax_rules_groups.json")
