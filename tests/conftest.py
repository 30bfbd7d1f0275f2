"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from apps.shopping.main import app


@pytest.fixture
def client() -> TestClient:
    """HTTP client bound to the app, no server needed"""
    return TestClient(app)


@pytest.fixture
def valid_form() -> dict:
    return {"quantity": "2", "price": "10.00", "tax": "8", "discount": "0"}
