# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles product CRUD rules and the read-only aggregations.
# Separates HTTP concerns from storage.
#
# Rules enforced here rather than in the store:
# - ids must be positive (checked before the store is touched)
# - a missing product is a ProductNotFoundError, not a None
# - any unexpected store failure becomes a generic ProductOperationError
# =============================================================================

import logging
from collections.abc import Awaitable
from datetime import datetime, timezone
from typing import TypeVar

from app.exceptions import (
    InvalidProductIdError,
    ProductNotFoundError,
    ProductOperationError,
    ProductsApiException,
)
from core.models.product import (
    ApiInfo,
    PriceRange,
    Product,
    ProductHealth,
    ProductInput,
    ProductStats,
    StoreInfo,
)
from core.models.validation import JsonValidationReport, ValidationSummary
from core.services.json_validator import (
    generate_sample_product_json,
    validate_product_collection_json,
    validate_product_json,
)
from core.services.product_store import ProductStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Stock at or below this (but above zero) counts as low
LOW_STOCK_THRESHOLD = 5

PRODUCTS_PATH = "/api/v1/products"

PRODUCT_ENDPOINTS = [
    f"GET {PRODUCTS_PATH}",
    f"GET {PRODUCTS_PATH}/{{id}}",
    f"POST {PRODUCTS_PATH}",
    f"PUT {PRODUCTS_PATH}/{{id}}",
    f"DELETE {PRODUCTS_PATH}/{{id}}",
]


class ProductService:
    """
    Service for product operations.

    Provides a clean interface between API routes and the product store.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_id(product_id: int) -> None:
        if product_id <= 0:
            logger.warning(f"Invalid product ID requested: {product_id}")
            raise InvalidProductIdError(product_id)

    @staticmethod
    async def _run(action: str, operation: Awaitable[T]) -> T:
        """Await a store call, converting unexpected failures to a generic error."""
        try:
            return await operation
        except ProductsApiException:
            raise
        except Exception as e:
            logger.error(f"Error occurred while {action}: {e}", exc_info=True)
            raise ProductOperationError(action) from e

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------

    async def list_products(self) -> list[Product]:
        """
        Get all products ordered by name.

        Raises:
            ProductOperationError: If the store fails
        """
        logger.info("Fetching all products")
        products = await self._run("fetching products", self.store.list_products())
        logger.info(f"Successfully retrieved {len(products)} products")
        return products

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product by id.

        Raises:
            InvalidProductIdError: If product_id <= 0
            ProductNotFoundError: If no product has this id
        """
        self._check_id(product_id)

        logger.info(f"Fetching product with ID: {product_id}")
        product = await self._run(
            "fetching the product", self.store.get_product(product_id)
        )

        if product is None:
            logger.warning(f"Product not found with ID: {product_id}")
            raise ProductNotFoundError(product_id)

        logger.info(f"Successfully retrieved product: {product.name}")
        return product

    async def create_product(self, data: ProductInput) -> Product:
        """
        Create a product from validated input.

        The store assigns the id and creation timestamp.
        """
        logger.info(f"Creating new product: {data.name}")
        product = await self._run(
            "creating the product", self.store.create_product(data)
        )
        logger.info(f"Successfully created product with ID: {product.id}")
        return product

    async def update_product(self, product_id: int, data: ProductInput) -> Product:
        """
        Replace every mutable field of a product.

        id and created_at are preserved.

        Raises:
            InvalidProductIdError: If product_id <= 0
            ProductNotFoundError: If no product has this id
        """
        self._check_id(product_id)

        logger.info(f"Updating product with ID: {product_id}")
        product = await self._run(
            "updating the product", self.store.update_product(product_id, data)
        )

        if product is None:
            logger.warning(f"Product not found for update with ID: {product_id}")
            raise ProductNotFoundError(product_id)

        logger.info(f"Successfully updated product: {product.name}")
        return product

    async def delete_product(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            InvalidProductIdError: If product_id <= 0
            ProductNotFoundError: If no product has this id
        """
        self._check_id(product_id)

        logger.info(f"Deleting product with ID: {product_id}")
        deleted = await self._run(
            "deleting the product", self.store.delete_product(product_id)
        )

        if not deleted:
            logger.warning(f"Product not found for deletion with ID: {product_id}")
            raise ProductNotFoundError(product_id)

        logger.info(f"Successfully deleted product with ID: {product_id}")

    # -------------------------------------------------------------------------
    # Aggregations
    # -------------------------------------------------------------------------

    async def get_categories(self) -> list[str]:
        """Distinct, sorted, non-empty category names."""
        products = await self._run("fetching categories", self.store.list_products())
        return sorted({p.category for p in products if p.category})

    async def get_stats(self) -> ProductStats:
        """Stock counts and price range over all products."""
        products = await self._run(
            "fetching product statistics", self.store.list_products()
        )

        price_range = None
        if products:
            prices = [p.price for p in products]
            price_range = PriceRange(
                min=float(min(prices)),
                max=float(max(prices)),
                average=round(float(sum(prices)) / len(prices), 2),
            )

        return ProductStats(
            total=len(products),
            in_stock=sum(1 for p in products if p.stock > 0),
            low_stock=sum(1 for p in products if 0 < p.stock <= LOW_STOCK_THRESHOLD),
            out_of_stock=sum(1 for p in products if p.stock == 0),
            categories=len({p.category for p in products}),
            price_range=price_range,
        )

    async def get_health(self, version: str) -> ProductHealth:
        """
        Report store reachability and size.

        Raises:
            ProductOperationError: If the store can't be read
        """
        products = await self._run("checking health", self.store.list_products())
        count = len(products)

        return ProductHealth(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            api=ApiInfo(
                version=version,
                product_count=count,
                endpoints=PRODUCT_ENDPOINTS,
            ),
            database=StoreInfo(
                connected=True,
                product_count=count,
                last_updated=max((p.created_at for p in products), default=None),
            ),
        )

    async def validate_json(self) -> JsonValidationReport:
        """Round-trip the current products through JSON and report the result."""
        logger.info("Validating JSON structure for products endpoint")
        products = await self._run("validating JSON", self.store.list_products())

        check = validate_product_collection_json(products)
        if check.valid:
            for product in products:
                check = validate_product_json(product)
                if not check.valid:
                    logger.warning(f"Product {product.id} failed JSON validation: {check.message}")
                    break

        outcome = "passed" if check.valid else "failed"

        report = JsonValidationReport(
            endpoint=PRODUCTS_PATH,
            timestamp=datetime.now(timezone.utc),
            validation=ValidationSummary(
                total_products=len(products),
                json_structure_valid=check.valid,
                serialization_test=outcome,
                deserialization_test=outcome,
                validation_message=check.message,
            ),
            sample_json_structure=products[0] if products else None,
            sample_json_formatted=generate_sample_product_json(),
        )

        logger.info("JSON structure validation completed")
        return report
