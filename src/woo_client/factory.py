"""
Factory functions for creating product fetch clients.
"""
from typing import Optional, Union

import httpx

from .config import ClientConfig, TimeoutConfig, load_config_from_env
from .core.base_client import AsyncProductFetchClient, SyncProductFetchClient
from .types import Credentials


def _build_config(
    store_url: str,
    consumer_key: str,
    consumer_secret: str,
    timeout: Union[TimeoutConfig, float, None],
    verify_tls: bool,
    trace: bool,
) -> ClientConfig:
    return ClientConfig(
        credentials=Credentials(
            store_url=store_url,
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
        ),
        timeout=timeout,
        verify_tls=verify_tls,
        trace=trace,
    )


def create_client(
    store_url: str,
    consumer_key: str,
    consumer_secret: str,
    *,
    timeout: Union[TimeoutConfig, float, None] = None,
    verify_tls: bool = True,
    trace: bool = False,
    httpx_client: Optional[httpx.Client] = None,
) -> SyncProductFetchClient:
    """
    Create a synchronous products client.

    Example:
        with create_client("https://shop.example.com", "ck_...", "cs_...") as client:
            result = client.fetch_page(page=2, page_size=20)
    """
    config = _build_config(store_url, consumer_key, consumer_secret, timeout, verify_tls, trace)
    return SyncProductFetchClient(config, httpx_client=httpx_client)


def create_async_client(
    store_url: str,
    consumer_key: str,
    consumer_secret: str,
    *,
    timeout: Union[TimeoutConfig, float, None] = None,
    verify_tls: bool = True,
    trace: bool = False,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> AsyncProductFetchClient:
    """
    Create an asynchronous products client.

    Example:
        async with create_async_client("https://shop.example.com", "ck_...", "cs_...") as client:
            result = await client.fetch_page()
    """
    config = _build_config(store_url, consumer_key, consumer_secret, timeout, verify_tls, trace)
    return AsyncProductFetchClient(config, httpx_client=httpx_client)


def create_client_from_env(env_file: Optional[str] = None, **overrides) -> SyncProductFetchClient:
    """Create a synchronous client from WC_* environment variables (and an optional .env file)."""
    return SyncProductFetchClient(load_config_from_env(env_file, **overrides))
