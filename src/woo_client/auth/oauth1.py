"""
OAuth 1.0a one-legged request signing (HMAC-SHA1) as verified by the
WooCommerce REST API for plain-HTTP query-string authentication.
"""
import base64
import hashlib
import hmac
import logging
import secrets
import time
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

from console_print import mask_sensitive

from ..types import Credentials, HttpMethod, SignedRequest

logger = logging.getLogger("woo_client.oauth1")
LOG_PREFIX = f"[AUTH:{__file__}]"

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
MIN_NONCE_BYTES = 16

ParamValue = Union[str, int]


def percent_encode(value: ParamValue) -> str:
    """RFC 3986 encoding: only ALPHA, DIGIT and ``-._~`` stay literal.

    Space becomes ``%20``, never ``+``.
    """
    return quote(str(value), safe="-._~")


def generate_nonce(num_bytes: int = MIN_NONCE_BYTES) -> str:
    """Hex-encoded random nonce from the OS CSPRNG."""
    if num_bytes < MIN_NONCE_BYTES:
        raise ValueError(f"nonce needs at least {MIN_NONCE_BYTES} random bytes, got {num_bytes}")
    return secrets.token_hex(num_bytes)


def generate_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


def _encoded_pairs(params: Mapping[str, ParamValue]) -> List[Tuple[str, str]]:
    # Sorted byte-wise on the encoded form; encoded strings are pure ASCII
    return sorted((percent_encode(key), percent_encode(value)) for key, value in params.items())


def normalize_parameters(params: Mapping[str, ParamValue]) -> str:
    """Canonical parameter string: encoded ``key=value`` pairs, sorted, joined by ``&``."""
    return "&".join(f"{key}={value}" for key, value in _encoded_pairs(params))


def build_base_string(method: str, url: str, params: Mapping[str, ParamValue]) -> str:
    """Signature base string ``METHOD&enc(url)&enc(normalized params)``."""
    return "&".join((
        method.upper(),
        percent_encode(url),
        percent_encode(normalize_parameters(params)),
    ))


def build_signing_key(consumer_secret: str, token_secret: str = "") -> str:
    """HMAC key. The token secret is empty for consumer-key-only flows."""
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def compute_signature(base_string: str, signing_key: str) -> str:
    """``base64(HMAC-SHA1(signing_key, base_string))``."""
    digest = hmac.new(
        signing_key.encode("utf-8"),
        base_string.encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(
    endpoint_url: str,
    method: str,
    query_params: Mapping[str, ParamValue],
    consumer_key: str,
    consumer_secret: str,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> Tuple[str, Dict[str, str]]:
    """Sign a request.

    Merges the caller's query parameters with the OAuth control parameters,
    signs them and returns ``(signature, all_params)``. ``all_params`` is in
    canonical order with ``oauth_signature`` appended last. Fresh nonce and
    timestamp are generated unless given.
    """
    params: Dict[str, str] = {key: str(value) for key, value in query_params.items()}
    params.update({
        "oauth_consumer_key": consumer_key,
        "oauth_timestamp": str(generate_timestamp() if timestamp is None else timestamp),
        "oauth_nonce": generate_nonce() if nonce is None else nonce,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_version": OAUTH_VERSION,
    })

    base_string = build_base_string(method, endpoint_url, params)
    signature = compute_signature(base_string, build_signing_key(consumer_secret))

    ordered = dict(sorted(params.items(), key=lambda item: (percent_encode(item[0]), percent_encode(item[1]))))
    ordered["oauth_signature"] = signature

    logger.debug(
        f"{LOG_PREFIX} sign: method={method.upper()}, url={endpoint_url}, "
        f"consumer_key={mask_sensitive(consumer_key, 3)}, nonce={mask_sensitive(params['oauth_nonce'])}, "
        f"timestamp={params['oauth_timestamp']}"
    )
    return signature, ordered


def build_signed_request(
    endpoint_url: str,
    method: HttpMethod,
    query_params: Mapping[str, ParamValue],
    credentials: Credentials,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> SignedRequest:
    """Sign and append the form-encoded query string to the endpoint."""
    _, all_params = sign(
        endpoint_url,
        method,
        query_params,
        credentials.consumer_key,
        credentials.consumer_secret,
        nonce=nonce,
        timestamp=timestamp,
    )
    separator = "&" if "?" in endpoint_url else "?"
    return SignedRequest(
        method=method,
        url=f"{endpoint_url}{separator}{urlencode(all_params)}",
        nonce=all_params["oauth_nonce"],
        timestamp=int(all_params["oauth_timestamp"]),
    )


class OAuth1Signer:
    """Signs GET requests with one immutable set of credentials.

    Holds no per-request state, so one signer can be shared across threads.
    ``nonce_factory`` and ``clock`` are injectable for deterministic tests.
    """

    def __init__(
        self,
        credentials: Credentials,
        nonce_factory: Callable[[], str] = generate_nonce,
        clock: Callable[[], int] = generate_timestamp,
    ):
        self._credentials = credentials
        self._nonce_factory = nonce_factory
        self._clock = clock

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def sign_request(
        self,
        endpoint_url: str,
        query_params: Mapping[str, ParamValue],
        method: str = "GET",
    ) -> SignedRequest:
        """Return a freshly signed request for the endpoint and parameters."""
        if method.upper() != "GET":
            raise ValueError(f"Only GET requests can be signed, got {method}")
        return build_signed_request(
            endpoint_url,
            "GET",
            query_params,
            self._credentials,
            nonce=self._nonce_factory(),
            timestamp=self._clock(),
        )

    def __repr__(self) -> str:
        return f"OAuth1Signer(credentials={self._credentials!r})"
