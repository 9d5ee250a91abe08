"""Tests for the JSON-file repositories (uses pytest's tmp_path)."""

import json

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.checkout import CheckoutSession, CheckoutStage
from storefront.domain.model.customer import CustomerData, DeliveryWindow, PaymentMethod
from storefront.domain.model.value_objects import DiscountRate, Money
from storefront.infrastructure.persistence.json_discount_policy_repository import (
    JsonDiscountPolicyRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)

PRODUCTS = [
    {"id": "1", "code": "BAT-001", "name": "Batom", "price": "24.90",
     "group": "Batons", "category": "Maquiagem"},
    {"id": 2, "code": "ESM-010", "name": "Esmalte", "price": 7.9, "group": "Esmaltes"},
]

POLICIES = [
    {"id": "b", "group": "Esmaltes", "min_quantity": 10, "max_quantity": None, "rate": "0.15"},
    {"id": "a", "group": "Esmaltes", "min_quantity": 5, "max_quantity": 9, "rate": "0.10"},
    {"id": "c", "group": "Batons", "min_quantity": 6, "max_quantity": 11, "rate": 0.05},
]


@pytest.fixture
def product_repo(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(PRODUCTS), encoding="utf-8")
    return JsonProductRepository(path)


class TestJsonProductRepository:

    def test_reads_catalog(self, product_repo):
        batom = product_repo.get_by_id("1")
        assert batom.price == Money.of("24.90")
        assert batom.group == "Batons"
        assert batom.category == "Maquiagem"
        assert [p.id for p in product_repo.list_all()] == ["1", "2"]

    def test_numeric_ids_and_prices_are_normalised(self, product_repo):
        esmalte = product_repo.get_by_id("2")
        assert esmalte.price == Money.of("7.9")
        assert esmalte.category == ""

    def test_missing_file_is_created_empty(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "nested" / "products.json")
        assert repo.list_all() == []
        assert repo.get_by_id("1") is None


class TestJsonDiscountPolicyRepository:

    def test_sorted_by_group_then_minimum(self, tmp_path):
        path = tmp_path / "discount_policies.json"
        path.write_text(json.dumps(POLICIES), encoding="utf-8")
        repo = JsonDiscountPolicyRepository(path)

        assert [p.id for p in repo.list_all()] == ["c", "a", "b"]
        esmaltes = repo.list_by_group("Esmaltes")
        assert [p.max_quantity for p in esmaltes] == [9, None]
        assert esmaltes[1].rate == DiscountRate.of("0.15")

    def test_edits_are_visible_immediately(self, tmp_path):
        path = tmp_path / "discount_policies.json"
        path.write_text(json.dumps(POLICIES), encoding="utf-8")
        repo = JsonDiscountPolicyRepository(path)
        assert len(repo.list_by_group("Batons")) == 1

        path.write_text("[]", encoding="utf-8")
        assert repo.list_by_group("Batons") == []

    def test_invalid_band_rejected(self, tmp_path):
        path = tmp_path / "discount_policies.json"
        path.write_text(json.dumps([
            {"id": "x", "group": "G", "min_quantity": 9, "max_quantity": 3, "rate": "0.1"},
        ]), encoding="utf-8")
        with pytest.raises(ValidationError):
            JsonDiscountPolicyRepository(path).list_all()


class TestJsonSessionRepository:

    def test_missing_file_gives_fresh_session(self, tmp_path, product_repo):
        repo = JsonSessionRepository(tmp_path / "session.json", product_repo)
        session = repo.load()
        assert session.cart.is_empty
        assert session.stage == CheckoutStage.COLLECTING_CUSTOMER_DATA

    def test_round_trip(self, tmp_path, product_repo):
        repo = JsonSessionRepository(tmp_path / "session.json", product_repo)
        session = CheckoutSession()
        session.cart.add_item(product_repo.get_by_id("2"))
        session.cart.add_item(product_repo.get_by_id("1"))
        session.cart.add_item(product_repo.get_by_id("2"))
        customer = CustomerData("Maria", "123", "Rua A", "119", PaymentMethod.CASH,
                                DeliveryWindow.MORNING)
        session.submit_customer_data(customer)
        repo.save(session)

        loaded = repo.load()
        assert [e.product_id for e in loaded.cart.entries] == ["2", "1"]
        assert loaded.cart.quantity_of("2") == 2
        assert loaded.cart.customer_data == customer
        assert loaded.customer_form == customer
        assert loaded.stage == CheckoutStage.REVIEWING_SUMMARY

    def test_products_gone_from_catalog_are_dropped(self, tmp_path, product_repo):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({
            "stage": "COLLECTING_CUSTOMER_DATA",
            "items": [{"product_id": "1", "quantity": 2},
                      {"product_id": "404", "quantity": 1}],
            "customer_form": {},
            "customer_data": None,
        }), encoding="utf-8")

        loaded = JsonSessionRepository(path, product_repo).load()
        assert loaded.cart.total_item_count() == 2
        assert loaded.cart.quantity_of("404") == 0

    def test_review_without_customer_data_falls_back_to_form(self, tmp_path, product_repo):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({
            "stage": "REVIEWING_SUMMARY", "items": [], "customer_data": None,
        }), encoding="utf-8")

        loaded = JsonSessionRepository(path, product_repo).load()
        assert loaded.stage == CheckoutStage.COLLECTING_CUSTOMER_DATA

    def test_unknown_stage_rejected(self, tmp_path, product_repo):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({
            "stage": "BOGUS", "items": [], "customer_data": None,
        }), encoding="utf-8")

        with pytest.raises(ValidationError, match="Corrupt session file"):
            JsonSessionRepository(path, product_repo).load()

    def test_unknown_payment_rejected(self, tmp_path, product_repo):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({
            "stage": "COLLECTING_CUSTOMER_DATA",
            "items": [],
            "customer_data": None,
            "customer_form": {"full_name": "Maria", "payment": "bitcoin"},
        }), encoding="utf-8")

        with pytest.raises(ValidationError, match="Corrupt session file"):
            JsonSessionRepository(path, product_repo).load()

    def test_malformed_json_rejected(self, tmp_path, product_repo):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Corrupt session file"):
            JsonSessionRepository(path, product_repo).load()
