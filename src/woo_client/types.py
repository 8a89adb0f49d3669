"""
Type definitions for woo_client.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Union

from console_print import mask_sensitive


# Only GET list calls are signed
HttpMethod = Literal["GET"]

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class ErrorKind(str, Enum):
    """Failure classification for a fetch."""

    NETWORK = "network"
    """Transport-level: DNS, connect, TLS, timeout"""

    HTTP_ERROR = "http_error"
    """Remote returned status >= 400"""

    API_ERROR = "api_error"
    """Remote returned an application error object with a non-error status"""

    DECODE_ERROR = "decode_error"
    """Body is not valid JSON"""

    UNEXPECTED_PAYLOAD = "unexpected_payload"
    """Valid JSON but neither a product list nor an error object"""


@dataclass(frozen=True)
class Credentials:
    """Store URL and REST API key pair. Immutable for the client's lifetime."""

    store_url: str
    consumer_key: str
    consumer_secret: str

    def __post_init__(self):
        # Normalize away trailing slashes so endpoint building never doubles them
        object.__setattr__(self, "store_url", self.store_url.rstrip("/"))

    def __repr__(self) -> str:
        """Safe repr that masks the key pair."""
        return (
            f"Credentials(store_url={self.store_url!r}, "
            f"consumer_key={mask_sensitive(self.consumer_key, 3)!r}, "
            f"consumer_secret='****')"
        )


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size for a products list call."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        for name in ("page", "page_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")


@dataclass(frozen=True)
class SignedRequest:
    """A fully signed request URL. Single-use: carries its own nonce and timestamp."""

    method: HttpMethod
    url: str
    nonce: str
    timestamp: int


@dataclass(frozen=True)
class RawResponse:
    """Status, lowercased headers and raw body of one HTTP response."""

    status_code: int
    headers: Mapping[str, str]
    body: bytes

    @classmethod
    def from_parts(cls, status_code: int, headers: Mapping[str, str], body: bytes) -> "RawResponse":
        return cls(
            status_code=status_code,
            headers={name.lower(): value for name, value in headers.items()},
            body=body,
        )


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination totals taken from the X-WP-Total / X-WP-TotalPages headers."""

    total_items: int = 0
    total_pages: int = 0
    current_page: int = DEFAULT_PAGE


@dataclass(frozen=True)
class Success:
    """Products in server order plus pagination metadata."""

    items: List[Dict[str, Any]]
    pagination: PaginationMeta = field(default_factory=PaginationMeta)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Typed failure. ``message`` never contains the consumer secret."""

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[Success, Failure]
