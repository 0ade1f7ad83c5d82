# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Handles product listing, lookup, creation, update and deletion, plus the
# read-only health/stats/categories aggregations.
#
# Business rules live in ProductService. Failures are raised as
# ProductsApiException subclasses and turned into JSON by the handlers
# registered in main.py.
# =============================================================================

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import ProductServiceDep
from app.exceptions import ProductOperationError
from core.models.product import Product, ProductHealth, ProductInput, ProductStats
from core.models.validation import JsonValidationReport

router = APIRouter()

ProductId = Annotated[int, Path(description="Product ID (positive integer)")]

ERROR_RESPONSES = {
    400: {"description": "Invalid product ID or request body"},
    404: {"description": "Product not found"},
    500: {"description": "Internal server error"},
}


# =============================================================================
# Aggregation Endpoints
# =============================================================================
# Declared before /{product_id} so the fixed paths match first.

@router.get(
    "/health",
    response_model=ProductHealth,
    response_model_exclude_none=True,
    responses={500: ERROR_RESPONSES[500]},
)
async def get_products_health(service: ProductServiceDep):
    """
    Products API health.

    Reports store reachability and product count. Useful for front ends
    testing their connection before issuing real requests.
    """
    try:
        return await service.get_health(settings.API_VERSION)
    except ProductOperationError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "unhealthy",
                "error": "Service unavailable",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )


@router.get(
    "/stats",
    response_model=ProductStats,
    response_model_exclude_none=True,
    responses={500: ERROR_RESPONSES[500]},
)
async def get_product_stats(service: ProductServiceDep):
    """
    Product summary statistics for dashboards.

    Counts in-stock, low-stock (1-5 units) and out-of-stock products and
    reports the price range.
    """
    return await service.get_stats()


@router.get(
    "/categories",
    response_model=list[str],
    responses={500: ERROR_RESPONSES[500]},
)
async def get_product_categories(service: ProductServiceDep):
    """
    Distinct product categories, sorted alphabetically.

    Useful for front-end filters and dropdowns.
    """
    return await service.get_categories()


@router.get(
    "/validate-json",
    response_model=JsonValidationReport,
    response_model_exclude_none=True,
    responses={500: ERROR_RESPONSES[500]},
)
async def validate_json_structure(service: ProductServiceDep):
    """
    Validate the JSON structure of the products endpoint (development aid).

    Round-trips the current products through JSON and returns the result
    together with a sample document and the field reference.
    """
    return await service.validate_json()


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[Product],
    response_model_exclude_none=True,
    responses={500: ERROR_RESPONSES[500]},
)
async def list_products(service: ProductServiceDep):
    """
    List all products.

    Products are ordered by name.
    """
    return await service.list_products()


@router.get(
    "/{product_id}",
    response_model=Product,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_product(product_id: ProductId, service: ProductServiceDep):
    """
    Get a product by ID.

    Returns 400 for non-positive ids and 404 if the product doesn't exist.
    """
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=Product,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def create_product(
    data: ProductInput,
    request: Request,
    response: Response,
    service: ProductServiceDep,
):
    """
    Create a new product.

    The id and creation timestamp are assigned by the server. The Location
    header points at the new product.
    """
    product = await service.create_product(data)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put(
    "/{product_id}",
    response_model=Product,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def update_product(
    product_id: ProductId,
    data: ProductInput,
    service: ProductServiceDep,
):
    """
    Replace a product's details.

    Every mutable field is overwritten; id and createdAt are kept.
    """
    return await service.update_product(product_id, data)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
async def delete_product(product_id: ProductId, service: ProductServiceDep):
    """
    Delete a product.

    Returns 204 with no body on success.
    """
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
