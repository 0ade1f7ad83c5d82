# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Products API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    ProductsApiException,
    products_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, products
from core.services.product_store import InMemoryProductStore, ProductStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The store is built in create_app(); startup and shutdown only log, since
    an in-memory store has nothing to connect or flush.
    """
    logger.info(f"Starting Products API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Product store: {type(app.state.product_store).__name__}")

    yield

    logger.info("Shutting down Products API")


def create_app(store: ProductStore | None = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        store: Product store to serve. Defaults to a freshly seeded
            in-memory store, so every process start begins from the
            same five products.

    Returns:
        FastAPI: The application, ready for uvicorn or TestClient
    """
    app = FastAPI(
        title="Products API",
        description="""
## Product Catalogue API

CRUD over an in-memory product catalogue, seeded with five products on every
start. Nothing is persisted.

### Error Responses

| Status | When |
|--------|------|
| **400** | Product id is not a positive integer, or the body fails validation |
| **404** | No product has the requested id |
| **500** | Unexpected server failure (details are logged, not returned) |
""",
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Products",
                "description": "Create, read, update and delete products",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    if store is None:
        store = InMemoryProductStore.seeded(
            latency_seconds=settings.simulated_latency_seconds
        )
    app.state.product_store = store

    # =========================================================================
    # Middleware
    # =========================================================================

    # CORS middleware - allows cross-origin requests from the front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=settings.is_production,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(ProductsApiException, products_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Health check endpoints
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # Product endpoints
    app.include_router(
        products.router,
        prefix="/api/v1/products",
        tags=["Products"]
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Products API",
            "version": settings.API_VERSION,
            "docs": "/docs",
            "health": "/health",
            "products": "/api/v1/products",
        }

    return app


# Application instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
