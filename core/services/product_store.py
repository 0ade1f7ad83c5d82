# =============================================================================
# core/services/product_store.py - Product Storage
# =============================================================================
# Defines the ProductStore interface and its in-memory implementation.
#
# Handlers only talk to the ProductStore interface, so a persistent backing
# can replace InMemoryProductStore without touching the API layer.
#
# The in-memory store:
# - Is seeded with five fixed products on construction
# - Allocates ids from a counter that never goes backwards (no id reuse)
# - Serializes every mutation through one asyncio.Lock
# - Hands out copies, so callers never hold a reference into the store
# =============================================================================

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from core.models.product import Product, ProductInput

logger = logging.getLogger(__name__)


# =============================================================================
# Seed Data
# =============================================================================

# (product fields, age in days at store construction)
SEED_PRODUCTS: list[tuple[dict, int]] = [
    (
        {
            "id": 1,
            "name": "Gaming Laptop",
            "price": Decimal("1299.99"),
            "stock": 15,
            "description": "High-performance gaming laptop with RTX 4070 GPU",
            "category": "Electronics",
            "is_available": True,
        },
        30,
    ),
    (
        {
            "id": 2,
            "name": "Wireless Headphones",
            "price": Decimal("199.99"),
            "stock": 50,
            "description": "Premium wireless headphones with noise cancellation",
            "category": "Audio",
            "is_available": True,
        },
        20,
    ),
    (
        {
            "id": 3,
            "name": "Mechanical Keyboard",
            "price": Decimal("149.99"),
            "stock": 25,
            "description": "RGB mechanical keyboard with Cherry MX switches",
            "category": "Accessories",
            "is_available": True,
        },
        15,
    ),
    (
        {
            "id": 4,
            "name": "4K Monitor",
            "price": Decimal("399.99"),
            "stock": 8,
            "description": "27-inch 4K IPS monitor with USB-C connectivity",
            "category": "Monitors",
            "is_available": True,
        },
        10,
    ),
    (
        {
            "id": 5,
            "name": "Smartphone",
            "price": Decimal("799.99"),
            "stock": 0,
            "description": "Latest flagship smartphone with 5G connectivity",
            "category": "Mobile",
            "is_available": False,
        },
        5,
    ),
]


def seed_products(now: datetime | None = None) -> list[Product]:
    """Build the fixed startup catalogue, aged relative to `now`."""
    now = now or datetime.now(timezone.utc)
    return [
        Product(**fields, created_at=now - timedelta(days=age_days))
        for fields, age_days in SEED_PRODUCTS
    ]


# =============================================================================
# Store Interface
# =============================================================================

class ProductStore(ABC):
    """
    Storage contract used by ProductService.

    All methods are coroutines. Lookups that miss return None (or False for
    delete) rather than raising; deciding what a miss means is the caller's job.
    """

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Return every product ordered by name ascending."""

    @abstractmethod
    async def get_product(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""

    @abstractmethod
    async def create_product(self, data: ProductInput) -> Product:
        """Assign an id and creation time, store, and return the new product."""

    @abstractmethod
    async def update_product(self, product_id: int, data: ProductInput) -> Product | None:
        """Overwrite the mutable fields of a product; None if it doesn't exist."""

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        """Remove a product; False if it doesn't exist."""


# =============================================================================
# In-Memory Implementation
# =============================================================================

class InMemoryProductStore(ProductStore):
    """
    Process-local product store.

    Contents live only as long as the process. Each call sleeps for
    `latency_seconds` to mimic a round trip to a real database.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        latency_seconds: float = 0.0,
    ):
        self._products: dict[int, Product] = {}
        for product in products or []:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id in initial data: {product.id}")
            self._products[product.id] = product.model_copy()

        self._next_id = max(self._products, default=0) + 1
        self._latency_seconds = latency_seconds
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls, latency_seconds: float = 0.0) -> "InMemoryProductStore":
        """Create a store holding the standard five-product catalogue."""
        return cls(seed_products(), latency_seconds=latency_seconds)

    async def _simulate_latency(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)

    async def list_products(self) -> list[Product]:
        await self._simulate_latency()
        products = sorted(self._products.values(), key=lambda p: (p.name.casefold(), p.name))
        return [p.model_copy() for p in products]

    async def get_product(self, product_id: int) -> Product | None:
        await self._simulate_latency()
        product = self._products.get(product_id)
        return product.model_copy() if product else None

    async def create_product(self, data: ProductInput) -> Product:
        await self._simulate_latency()

        async with self._lock:
            product = Product(
                **data.model_dump(),
                id=self._next_id,
                created_at=datetime.now(timezone.utc),
            )
            self._products[product.id] = product
            self._next_id += 1

        logger.debug(f"Stored product {product.id}: {product.name}")
        return product.model_copy()

    async def update_product(self, product_id: int, data: ProductInput) -> Product | None:
        await self._simulate_latency()

        async with self._lock:
            existing = self._products.get(product_id)
            if existing is None:
                return None

            updated = existing.apply(data)
            self._products[product_id] = updated

        return updated.model_copy()

    async def delete_product(self, product_id: int) -> bool:
        await self._simulate_latency()

        async with self._lock:
            if product_id not in self._products:
                return False
            del self._products[product_id]

        return True

    def __len__(self) -> int:
        return len(self._products)
