"""
Core client, request building and response parsing.
"""
from .base_client import AsyncProductFetchClient, SyncProductFetchClient
from .request_builder import build_products_endpoint, build_products_query, build_url
from .response_parser import parse_pagination, parse_response

__all__ = [
    "AsyncProductFetchClient",
    "SyncProductFetchClient",
    "build_products_endpoint",
    "build_products_query",
    "build_url",
    "parse_pagination",
    "parse_response",
]
