"""Tests for the JSON-file repositories."""

import json
from decimal import Decimal

import pytest

from catalog.domain.exceptions import DataStoreError
from catalog.domain.model.product import Product
from catalog.domain.model.tax_rules_group import TaxRulesGroup
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_tax_rules_group_repository import (
    JsonTaxRulesGroupRepository,
)


@pytest.fixture
def products_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 5,
                    "name": "Coffee beans",
                    "price": "10.00",
                    "unit_price_ratio": "5",
                    "unity": "per 100g",
                    "ecotax": "0",
                    "tax_rules_group_id": 0,
                    "on_sale": False,
                    "wholesale_price": "6.00",
                }
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "nested" / "products.json")
        assert repo.list_all() == []
        assert repo.next_id() == 1

    def test_unit_price_rebuilt_on_load(self, products_file):
        product = JsonProductRepository(products_file).get_by_id(5)

        assert product.price == Decimal("10.00")
        assert product.unit_price == Decimal("2")

    def test_update_writes_only_named_columns(self, products_file):
        repo = JsonProductRepository(products_file)
        product = repo.get_by_id(5)
        product.price = Decimal("12.00")
        product.wholesale_price = Decimal("99")

        assert repo.update(product, {"price"}) is True

        stored = json.loads(products_file.read_text(encoding="utf-8"))[0]
        assert stored["price"] == "12.00"
        assert stored["wholesale_price"] == "6.00"

    def test_unit_price_is_never_stored(self, products_file):
        repo = JsonProductRepository(products_file)
        product = repo.get_by_id(5)
        product.unit_price = Decimal("4")
        product.unit_price_ratio = Decimal("2.5")

        repo.update(product, {"unit_price", "unit_price_ratio"})

        stored = json.loads(products_file.read_text(encoding="utf-8"))[0]
        assert "unit_price" not in stored
        assert stored["unit_price_ratio"] == "2.5"
        assert repo.get_by_id(5).unit_price == Decimal("4")

    def test_update_missing_record_returns_false(self, products_file):
        repo = JsonProductRepository(products_file)
        ghost = Product(id=77, name="Ghost")

        assert repo.update(ghost, {"price"}) is False

    def test_update_unknown_column_rejected(self, products_file):
        repo = JsonProductRepository(products_file)

        with pytest.raises(ValueError, match="unknown product columns"):
            repo.update(repo.get_by_id(5), {"name"})

    def test_add_then_next_id(self, products_file):
        repo = JsonProductRepository(products_file)
        repo.add(Product(id=repo.next_id(), name="Tea", price=Decimal("3")))

        assert repo.get_by_id(6).name == "Tea"
        assert repo.next_id() == 7

    def test_corrupt_file_raises_data_store_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataStoreError):
            JsonProductRepository(path).get_by_id(1)

    def test_next_id_with_record_missing_id(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('[{"name": "no id"}]', encoding="utf-8")

        with pytest.raises(DataStoreError, match="Corrupt product record"):
            JsonProductRepository(path).next_id()


class TestJsonTaxRulesGroupRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonTaxRulesGroupRepository(tmp_path / "groups.json")
        repo.add(TaxRulesGroup(id=1, name="Standard"))

        assert repo.get_by_id(1) == TaxRulesGroup(id=1, name="Standard", active=True)
        assert repo.get_by_id(2) is None

    def test_corrupt_file_raises_data_store_error(self, tmp_path):
        path = tmp_path / "groups.json"
        path.write_text('[{"name": "no id"}]', encoding="utf-8")

        with pytest.raises(DataStoreError):
            JsonTaxRulesGroupRepository(path).list_all()
