# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Products API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_product_store.py: In-memory store behaviour
# - test_products_api.py: HTTP endpoints through TestClient
# - test_error_handler.py: Client failure builders
# - test_api_client.py: Client request pipeline and ProductsClient
#
# Run tests with: pytest
# =============================================================================
