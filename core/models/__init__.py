# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - product.py: Product, ProductInput and the stats/health aggregations
# - validation.py: JSON structure validation report
#
# These models define the "contract" between API and clients. The client
# pipeline in lib/ decodes responses into the same classes.
# =============================================================================

# -----------------------------------------------------------------------------
# Product Models
# -----------------------------------------------------------------------------
from .product import (
    ApiInfo,
    CamelModel,
    PriceRange,
    Product,
    ProductHealth,
    ProductInput,
    ProductStats,
    StoreInfo,
)

# -----------------------------------------------------------------------------
# Validation Models
# -----------------------------------------------------------------------------
from .validation import (
    EXPECTED_FIELDS,
    JSON_FORMAT_NOTES,
    CheckResult,
    JsonValidationReport,
    ValidationSummary,
)

__all__ = [
    # Product
    "ApiInfo",
    "CamelModel",
    "PriceRange",
    "Product",
    "ProductHealth",
    "ProductInput",
    "ProductStats",
    "StoreInfo",
    # Validation
    "EXPECTED_FIELDS",
    "JSON_FORMAT_NOTES",
    "CheckResult",
    "JsonValidationReport",
    "ValidationSummary",
]
