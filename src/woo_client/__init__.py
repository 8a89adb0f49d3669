"""
WooCommerce REST API products client.

Signs list requests with OAuth 1.0a (HMAC-SHA1) query-string authentication
and returns each page as a typed Success or Failure.
"""
from .types import (
    Credentials,
    ErrorKind,
    Failure,
    FetchResult,
    PageRequest,
    PaginationMeta,
    RawResponse,
    SignedRequest,
    Success,
)
from .config import (
    ClientConfig,
    MissingCredentialsError,
    TimeoutConfig,
    WooClientConfigError,
    load_config_from_env,
    load_credentials_from_env,
)
from .auth.oauth1 import OAuth1Signer, build_signed_request, percent_encode, sign
from .core.base_client import AsyncProductFetchClient, SyncProductFetchClient
from .factory import create_async_client, create_client, create_client_from_env

__all__ = [
    # Types
    "Credentials",
    "ErrorKind",
    "Failure",
    "FetchResult",
    "PageRequest",
    "PaginationMeta",
    "RawResponse",
    "SignedRequest",
    "Success",
    # Config
    "ClientConfig",
    "TimeoutConfig",
    "WooClientConfigError",
    "MissingCredentialsError",
    "load_config_from_env",
    "load_credentials_from_env",
    # Signing
    "OAuth1Signer",
    "build_signed_request",
    "percent_encode",
    "sign",
    # Clients
    "AsyncProductFetchClient",
    "SyncProductFetchClient",
    # Factory
    "create_client",
    "create_async_client",
    "create_client_from_env",
]

__version__ = "0.1.0"
