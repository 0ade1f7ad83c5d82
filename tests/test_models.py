# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the product models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to camelCase JSON with nulls omitted
# - Field names are matched case-insensitively on input
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.models import Product, ProductInput, ProductStats


# =============================================================================
# ProductInput Tests
# =============================================================================

class TestProductInput:
    """Tests for ProductInput validation."""

    def test_valid_input(self, product_payload):
        """Test creating a ProductInput from wire-format JSON."""
        data = ProductInput(**product_payload)

        assert data.name == "USB-C Hub"
        assert data.price == Decimal("49.99")
        assert data.stock == 12
        assert data.is_available is True

    def test_defaults(self):
        """Only name, price and stock are required."""
        data = ProductInput(name="X", price=9.99, stock=1)

        assert data.description is None
        assert data.category is None
        assert data.is_available is True

    def test_snake_case_names_accepted(self):
        """Python field names work as well as camelCase aliases."""
        data = ProductInput(name="X", price=1, stock=0, is_available=False)
        assert data.is_available is False

    def test_keys_matched_case_insensitively(self):
        """Keys differing only in case land on the right field."""
        data = ProductInput.model_validate(
            {"NAME": "X", "Price": 5, "STOCK": 2, "isavailable": False, "Category": "Audio"}
        )

        assert data.name == "X"
        assert data.price == Decimal("5")
        assert data.is_available is False
        assert data.category == "Audio"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", "x" * 101])
    def test_name_length(self, name):
        """Name must be 1-100 characters and not blank."""
        with pytest.raises(ValidationError):
            ProductInput(name=name, price=1, stock=0)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ProductInput(price=1, stock=0)

    @pytest.mark.parametrize("price", [0, -1, "0.00", 1_000_000, "999999.991"])
    def test_price_out_of_range(self, price):
        """Price must be within 0.01 - 999999.99."""
        with pytest.raises(ValidationError):
            ProductInput(name="X", price=price, stock=0)

    @pytest.mark.parametrize("price", ["0.01", "999999.99"])
    def test_price_bounds_inclusive(self, price):
        assert ProductInput(name="X", price=price, stock=0).price == Decimal(price)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            ProductInput(name="X", price=1, stock=-1)

    def test_description_and_category_limits(self):
        """Description is capped at 500 characters, category at 50."""
        ProductInput(name="X", price=1, stock=0, description="d" * 500, category="c" * 50)

        with pytest.raises(ValidationError):
            ProductInput(name="X", price=1, stock=0, description="d" * 501)

        with pytest.raises(ValidationError):
            ProductInput(name="X", price=1, stock=0, category="c" * 51)

    def test_id_and_created_at_ignored(self, product_payload):
        """The store owns id and createdAt; input silently drops them."""
        data = ProductInput(**product_payload, id=99, createdAt="2020-01-01T00:00:00Z")
        assert "id" not in data.model_dump()
        assert "created_at" not in data.model_dump()


# =============================================================================
# Product Tests
# =============================================================================

class TestProduct:
    """Tests for Product parsing and serialization."""

    def test_parse_wire_format(self, product_json):
        product = Product.model_validate(product_json)

        assert product.id == 3
        assert product.price == Decimal("149.99")
        assert product.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_serializes_camel_case(self, product_json):
        product = Product.model_validate(product_json)
        dumped = json.loads(product.model_dump_json(by_alias=True))

        assert "isAvailable" in dumped
        assert "createdAt" in dumped
        assert "is_available" not in dumped

    def test_price_serialized_as_number(self, product_json):
        product = Product.model_validate(product_json)
        dumped = json.loads(product.model_dump_json(by_alias=True))

        assert dumped["price"] == 149.99

    def test_timestamp_is_iso_utc(self, product_json):
        product = Product.model_validate(product_json)
        dumped = json.loads(product.model_dump_json(by_alias=True))

        assert dumped["createdAt"].startswith("2024-01-15T10:30:00")
        assert dumped["createdAt"].endswith("Z")

    def test_null_optional_fields_omitted(self, product_json):
        product_json.pop("description")
        product_json.pop("category")
        product = Product.model_validate(product_json)

        dumped = json.loads(product.model_dump_json(by_alias=True, exclude_none=True))

        assert "description" not in dumped
        assert "category" not in dumped

    def test_json_round_trip_is_stable(self, product_json):
        """serialize(deserialize(serialize(p))) == serialize(p)"""
        product = Product.model_validate(product_json)
        first = product.model_dump_json(by_alias=True, exclude_none=True)
        second = Product.model_validate_json(first).model_dump_json(by_alias=True, exclude_none=True)

        assert first == second

    def test_id_must_be_positive(self, product_json):
        product_json["id"] = 0
        with pytest.raises(ValidationError):
            Product.model_validate(product_json)

    def test_apply_keeps_identity(self, product_json):
        """apply() replaces mutable fields but never id or created_at."""
        product = Product.model_validate(product_json)
        changes = ProductInput(name="Quiet Keyboard", price=99, stock=3)

        updated = product.apply(changes)

        assert updated.id == product.id
        assert updated.created_at == product.created_at
        assert updated.name == "Quiet Keyboard"
        assert updated.stock == 3
        assert updated.description is None
        assert updated.category is None


class TestProductStats:
    """Tests for ProductStats defaults."""

    def test_empty_stats(self):
        stats = ProductStats()
        dumped = stats.model_dump(by_alias=True, exclude_none=True)

        assert dumped == {"total": 0, "inStock": 0, "lowStock": 0, "outOfStock": 0, "categories": 0}
