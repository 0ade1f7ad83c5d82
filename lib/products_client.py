# =============================================================================
# lib/products_client.py - Typed Products API Client
# =============================================================================
# Thin facade over ApiClient with one method per Products API endpoint.
# Each method picks the path, the expected payload type and an operation
# label; ApiClient does the rest.
#
# Usage:
#   async with ProductsClient() as products:
#       result = await products.get_product(3)
#       if result.is_success:
#           print(result.data.name)
# =============================================================================

from __future__ import annotations

from core.models.product import Product, ProductHealth, ProductInput, ProductStats
from core.models.validation import JsonValidationReport
from lib.api_client import ApiClient
from lib.api_result import ApiResult

PRODUCTS_PATH = "/api/v1/products"


class ProductsClient:
    """Product operations as the front end calls them."""

    def __init__(self, api: ApiClient | None = None):
        self.api = api or ApiClient()

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> ProductsClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def list_products(self) -> ApiResult[list[Product]]:
        return await self.api.get(PRODUCTS_PATH, list[Product], operation="Load products")

    async def get_product(self, product_id: int) -> ApiResult[Product]:
        return await self.api.get(
            f"{PRODUCTS_PATH}/{product_id}",
            Product,
            operation=f"Load product {product_id}",
        )

    async def create_product(self, product: ProductInput) -> ApiResult[Product]:
        return await self.api.post(
            PRODUCTS_PATH,
            product,
            Product,
            operation="Create product",
        )

    async def update_product(self, product_id: int, product: ProductInput) -> ApiResult[Product]:
        return await self.api.put(
            f"{PRODUCTS_PATH}/{product_id}",
            product,
            Product,
            operation=f"Update product {product_id}",
        )

    async def delete_product(self, product_id: int) -> ApiResult[None]:
        """Succeeds with data=None; the server answers 204 with no body."""
        return await self.api.delete(
            f"{PRODUCTS_PATH}/{product_id}",
            operation=f"Delete product {product_id}",
        )

    async def get_health(self) -> ApiResult[ProductHealth]:
        return await self.api.get(
            f"{PRODUCTS_PATH}/health",
            ProductHealth,
            operation="Check API health",
        )

    async def get_stats(self) -> ApiResult[ProductStats]:
        return await self.api.get(
            f"{PRODUCTS_PATH}/stats",
            ProductStats,
            operation="Load product stats",
        )

    async def get_categories(self) -> ApiResult[list[str]]:
        return await self.api.get(
            f"{PRODUCTS_PATH}/categories",
            list[str],
            operation="Load categories",
        )

    async def validate_json(self) -> ApiResult[JsonValidationReport]:
        return await self.api.get(
            f"{PRODUCTS_PATH}/validate-json",
            JsonValidationReport,
            operation="Validate JSON structure",
        )
