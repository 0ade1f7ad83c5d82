# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the product domain:
# - models/: Pydantic schemas shared by the API and the client pipeline
# - services/: Product store interface, in-memory store, business rules
#
# Code in this package should NOT import from FastAPI directly.
# This keeps the logic testable and reusable.
# =============================================================================
