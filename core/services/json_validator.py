# =============================================================================
# core/services/json_validator.py - JSON Structure Validation
# =============================================================================
# Round-trips products through the wire format to catch serialization drift
# (renamed aliases, lossy price conversion, dropped fields) during development.
#
# Usage:
#   from core.services.json_validator import validate_product_collection_json
#   result = validate_product_collection_json(products)
#   if not result.valid:
#       print(result.message)
# =============================================================================

import logging
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import TypeAdapter, ValidationError

from core.models.product import Product
from core.models.validation import CheckResult

logger = logging.getLogger(__name__)

_product_list = TypeAdapter(list[Product])


def to_json(product: Product, indent: int | None = None) -> str:
    """Serialize a product exactly as the API sends it."""
    return product.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def validate_product_json(product: Product) -> CheckResult:
    """
    Validate a single product and its JSON round-trip.

    Re-checks the field constraints, then serializes and parses the product
    back, comparing the identifying fields.
    """
    try:
        Product.model_validate(product.model_dump())
    except ValidationError as e:
        messages = ", ".join(err["msg"] for err in e.errors())
        return CheckResult.failed(f"Product validation failed: {messages}")

    try:
        restored = Product.model_validate_json(to_json(product))
    except ValidationError as e:
        return CheckResult.failed(f"JSON serialization/deserialization failed: {e}")

    if (
        restored.id != product.id
        or restored.name != product.name
        or restored.price != product.price
        or restored.stock != product.stock
    ):
        return CheckResult.failed("JSON round-trip validation failed - data mismatch")

    return CheckResult.ok()


def validate_product_collection_json(products: list[Product]) -> CheckResult:
    """Validate that a list of products survives a JSON round-trip."""
    try:
        payload = _product_list.dump_json(products, by_alias=True, exclude_none=True)
        restored = _product_list.validate_json(payload)
    except ValidationError as e:
        logger.warning(f"Collection round-trip failed: {e}")
        return CheckResult.failed(f"JSON collection serialization/deserialization failed: {e}")

    if len(restored) != len(products):
        return CheckResult.failed("JSON collection round-trip validation failed - count mismatch")

    return CheckResult.ok()


def generate_sample_product_json() -> str:
    """Pretty-printed sample product for documentation."""
    sample = Product(
        id=1,
        name="Sample Product",
        price=Decimal("99.99"),
        stock=10,
        description="This is a sample product for testing JSON structure",
        category="Electronics",
        is_available=True,
        created_at=datetime.now(timezone.utc),
    )
    return to_json(sample, indent=2)
