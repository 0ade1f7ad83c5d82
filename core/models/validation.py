# =============================================================================
# core/models/validation.py - JSON Structure Validation Schemas
# =============================================================================
# Response models for GET /products/validate-json, a development endpoint that
# round-trips the current products through JSON and reports the result along
# with the documented wire format.
# =============================================================================

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .product import CamelModel, Product


class CheckResult(CamelModel):
    """Outcome of a single round-trip check."""
    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> CheckResult:
        return cls(valid=True)

    @classmethod
    def failed(cls, message: str) -> CheckResult:
        return cls(valid=False, message=message)


class ValidationSummary(CamelModel):
    """Round-trip results over the product collection."""
    total_products: int = Field(default=0, ge=0)
    json_structure_valid: bool
    serialization_test: str
    deserialization_test: str
    validation_message: str | None = None


# Field documentation shown to API consumers
EXPECTED_FIELDS: dict[str, str] = {
    "id": "integer - Unique product identifier",
    "name": "string - Product name (required)",
    "price": "decimal - Product price (required, positive)",
    "stock": "integer - Available stock quantity (non-negative)",
    "description": "string - Product description (optional)",
    "category": "string - Product category (optional)",
    "isAvailable": "boolean - Product availability status",
    "createdAt": "datetime - When the product was created",
}

JSON_FORMAT_NOTES: dict[str, str] = {
    "propertyNaming": "camelCase",
    "dateFormat": "ISO 8601 (yyyy-MM-ddTHH:mm:ss.ffffffZ)",
    "priceFormat": "decimal with 2 decimal places",
    "nullHandling": "null values are omitted from JSON output",
}


class JsonValidationReport(CamelModel):
    """Full report returned by the validate-json endpoint."""
    endpoint: str
    timestamp: datetime
    validation: ValidationSummary
    sample_json_structure: Product | None = None
    sample_json_formatted: str
    expected_fields: dict[str, str] = Field(default_factory=lambda: dict(EXPECTED_FIELDS))
    json_format_notes: dict[str, str] = Field(default_factory=lambda: dict(JSON_FORMAT_NOTES))
