# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh app, store and TestClient per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SIMULATED_LATENCY_MS", "0")
os.environ.setdefault("API_BASE_URL", "http://testserver")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.services.product_store import InMemoryProductStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Seeded in-memory store with no simulated latency."""
    return InMemoryProductStore.seeded()


@pytest.fixture
def app(store):
    """Application bound to the test store."""
    return create_app(store)


@pytest.fixture
def client(app):
    """TestClient for the products API."""
    return TestClient(app)


@pytest.fixture
def product_payload():
    """Valid create/update body in wire format."""
    return {
        "name": "USB-C Hub",
        "price": 49.99,
        "stock": 12,
        "description": "7-in-1 hub with HDMI and card reader",
        "category": "Accessories",
        "isAvailable": True,
    }


@pytest.fixture
def product_json():
    """A stored product as the server sends it."""
    return {
        "id": 3,
        "name": "Mechanical Keyboard",
        "price": 149.99,
        "stock": 25,
        "description": "RGB mechanical keyboard with Cherry MX switches",
        "category": "Accessories",
        "isAvailable": True,
        "createdAt": "2024-01-15T10:30:00Z",
    }
