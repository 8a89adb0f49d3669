"""
Shared fixtures for woo_client tests.
"""
import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from woo_client.config import ClientConfig
from woo_client.types import Credentials

STORE_URL = "https://shop.example.com"
CONSUMER_KEY = "ck_test_0123456789abcdef"
CONSUMER_SECRET = "cs_test_fedcba9876543210"
PRODUCTS_URL = f"{STORE_URL}/wp-json/wc/v3/products"


@pytest.fixture
def credentials():
    """Sample Credentials for testing."""
    return Credentials(
        store_url=STORE_URL,
        consumer_key=CONSUMER_KEY,
        consumer_secret=CONSUMER_SECRET,
    )


@pytest.fixture
def client_config(credentials):
    """Sample ClientConfig for testing."""
    return ClientConfig(credentials=credentials)


@pytest.fixture
def mock_httpx_sync_client():
    """Mock httpx.Client for testing."""
    client = MagicMock(spec=httpx.Client)
    client.close = MagicMock()
    return client


@pytest.fixture
def mock_httpx_async_client():
    """Mock httpx.AsyncClient for testing."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.aclose = AsyncMock()
    return client


def make_mock_response(
    status_code: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    reason_phrase: str = "OK",
) -> MagicMock:
    """Build a mock httpx.Response. Non-bytes bodies are JSON encoded."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.headers = headers or {}
    if body is None:
        response.content = b""
    elif isinstance(body, bytes):
        response.content = body
    else:
        response.content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def make_response():
    """Factory fixture for mock httpx responses."""
    return make_mock_response
