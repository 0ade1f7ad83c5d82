# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for product operations:
# - ProductInput: Writable fields accepted by create and update
# - Product: A stored product as returned to clients
# - ProductStats / PriceRange: Dashboard aggregation over the store
# - ProductHealth: Store reachability report
#
# JSON uses camelCase names (isAvailable, createdAt). Input accepts either
# camelCase or snake_case, and field names are matched case-insensitively so
# the client pipeline can decode payloads from any producer.
# =============================================================================

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Prices are exact decimals in Python but plain numbers on the wire
Price = Annotated[
    Decimal,
    Field(ge=Decimal("0.01"), le=Decimal("999999.99")),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """
    Base model for camelCase JSON payloads.

    Incoming keys are folded onto the declared field aliases without regard
    to case, so "IsAvailable", "isavailable" and "is_available" all land on
    the same field.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias

        folded: dict[str, Any] = {}
        for key, value in data.items():
            target = lookup.get(key.lower(), key) if isinstance(key, str) else key
            # An exact-case key wins over a folded duplicate
            if target in folded and key != target:
                continue
            folded[target] = value
        return folded


class ProductInput(CamelModel):
    """
    Writable product fields, used as the body of create and update.

    Any id or createdAt sent by the client is ignored; the store owns both.

    Example:
        {
            "name": "USB-C Hub",
            "price": 49.99,
            "stock": 12,
            "category": "Accessories"
        }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Product name"
    )

    price: Price = Field(
        ...,
        description="Unit price, between 0.01 and 999999.99"
    )

    stock: int = Field(
        ...,
        ge=0,
        description="Units in stock"
    )

    description: str | None = Field(
        default=None,
        max_length=500,
        description="Optional long description"
    )

    category: str | None = Field(
        default=None,
        max_length=50,
        description="Optional category label"
    )

    is_available: bool = Field(
        default=True,
        description="Whether the product can currently be ordered"
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "USB-C Hub",
                "price": 49.99,
                "stock": 12,
                "description": "7-in-1 hub with HDMI and card reader",
                "category": "Accessories",
                "isAvailable": True,
            }
        }
    )


class Product(ProductInput):
    """
    A product held by the store.

    Returned by every product endpoint and decoded by the client pipeline.
    `id` and `created_at` are assigned once by the store and never change.
    """

    id: int = Field(
        ...,
        gt=0,
        description="Store-assigned identifier"
    )

    created_at: datetime = Field(
        ...,
        description="UTC timestamp when the product was created"
    )

    def apply(self, changes: ProductInput) -> Product:
        """Return a copy with every mutable field taken from `changes`."""
        return self.model_copy(update=changes.model_dump())


class PriceRange(CamelModel):
    """Price spread across all products."""
    min: float
    max: float
    average: float


class ProductStats(CamelModel):
    """Stock and price summary for dashboards."""
    total: int = Field(default=0, ge=0)
    in_stock: int = Field(default=0, ge=0)
    low_stock: int = Field(default=0, ge=0)
    out_of_stock: int = Field(default=0, ge=0)
    categories: int = Field(default=0, ge=0)
    price_range: PriceRange | None = None


class ApiInfo(CamelModel):
    """API section of the products health report."""
    version: str
    product_count: int
    endpoints: list[str] = Field(default_factory=list)


class StoreInfo(CamelModel):
    """Store section of the products health report."""
    connected: bool
    product_count: int
    last_updated: datetime | None = None


class ProductHealth(CamelModel):
    """Products API health report."""
    status: str
    timestamp: datetime
    api: ApiInfo
    database: StoreInfo
