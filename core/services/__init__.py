# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_store import InMemoryProductStore, ProductStore, seed_products
from .product_service import ProductService

__all__ = [
    "InMemoryProductStore",
    "ProductStore",
    "ProductService",
    "seed_products",
]
