# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The product store lives on app.state so each application instance (and
# each test) owns an independent store.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.product_service import ProductService
from core.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """
    Get the product store for this application.

    Returns the store created in create_app().
    """
    return request.app.state.product_store


def get_product_service(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ProductService:
    """Build a ProductService bound to the application's store."""
    return ProductService(store)


# Type aliases for dependency injection
ProductStoreDep = Annotated[ProductStore, Depends(get_product_store)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
