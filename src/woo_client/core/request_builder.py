"""
Request builder utilities for woo_client.
"""
from typing import Dict, Union

from ..types import PageRequest

REST_PREFIX = "/wp-json"
PRODUCTS_ROUTE = "/wc/v3/products"
PUBLISHED_STATUS = "publish"


def build_url(store_url: str, route: str) -> str:
    """Join the store URL and a REST route without doubling slashes."""
    return f"{store_url.rstrip('/')}{REST_PREFIX}/{route.lstrip('/')}"


def build_products_endpoint(store_url: str) -> str:
    """``{store_url}/wp-json/wc/v3/products``"""
    return build_url(store_url, PRODUCTS_ROUTE)


def build_products_query(page_request: PageRequest) -> Dict[str, Union[str, int]]:
    """Query parameters for one page of published products."""
    return {
        "page": page_request.page,
        "per_page": page_request.page_size,
        "status": PUBLISHED_STATUS,
    }
