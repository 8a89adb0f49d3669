"""
Configuration for woo_client.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Union
from urllib.parse import urlparse
import logging
import os

from dotenv import load_dotenv

from .types import Credentials

logger = logging.getLogger("woo_client.config")

ENV_STORE_URL = "WC_STORE_URL"
ENV_CONSUMER_KEY = "WC_CONSUMER_KEY"
ENV_CONSUMER_SECRET = "WC_CONSUMER_SECRET"
ENV_INSECURE_SKIP_TLS_VERIFY = "WC_INSECURE_SKIP_TLS_VERIFY"
ENV_REQUEST_TIMEOUT = "WC_REQUEST_TIMEOUT"

DEFAULT_USER_AGENT = "WooCommerce-API-Client/1.0"


class WooClientConfigError(Exception):
    """Base class for configuration loading errors."""
    pass


class MissingCredentialsError(WooClientConfigError):
    """Raised when a required credential variable is not set."""
    pass


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration.

    ``verify_tls`` must stay True outside local test stores; turning it off
    removes protection against man-in-the-middle attacks.
    """

    credentials: Credentials
    timeout: Union[TimeoutConfig, float, None] = None
    verify_tls: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    headers: Dict[str, str] = field(default_factory=dict)
    trace: bool = False


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    credentials: Credentials
    timeout: TimeoutConfig
    verify_tls: bool
    headers: Dict[str, str]
    trace: bool


DEFAULT_TIMEOUT = TimeoutConfig()


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_config(config: ClientConfig) -> None:
    """Validate client configuration.

    Error messages name the offending field and never echo key or secret.
    """
    credentials = config.credentials
    if not credentials.store_url:
        raise ValueError("store_url is required")

    parsed = urlparse(credentials.store_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid store_url: {credentials.store_url}")

    if not credentials.consumer_key:
        raise ValueError("consumer_key is required")
    if not credentials.consumer_secret:
        raise ValueError("consumer_secret is required")

    timeout = normalize_timeout(config.timeout)
    for name in ("connect", "read", "write"):
        if getattr(timeout, name) <= 0:
            raise ValueError(f"timeout.{name} must be positive")


def build_default_headers(config: ClientConfig) -> Dict[str, str]:
    """Fixed request headers. All auth travels in the query string."""
    headers = {
        "user-agent": config.user_agent or DEFAULT_USER_AGENT,
        "accept": "application/json",
    }
    headers.update({name.lower(): value for name, value in config.headers.items()})
    return headers


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    validate_config(config)

    if not config.verify_tls:
        logger.warning(
            f"TLS certificate verification is DISABLED for {config.credentials.store_url}. "
            f"Only use this against local test stores."
        )

    return ResolvedConfig(
        credentials=config.credentials,
        timeout=normalize_timeout(config.timeout),
        verify_tls=config.verify_tls,
        headers=build_default_headers(config),
        trace=config.trace,
    )


def _require_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise MissingCredentialsError(f"{name} is not set")
    return value


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_credentials_from_env(env_file: Optional[str] = None) -> Credentials:
    """Load credentials from the environment.

    Values from ``env_file`` (or a ``.env`` found by python-dotenv) are loaded
    first without overriding variables already set in the process.
    """
    loaded = load_dotenv(dotenv_path=env_file, override=False)
    logger.debug(f"load_credentials_from_env: env_file={env_file}, loaded={loaded}")

    return Credentials(
        store_url=_require_env(ENV_STORE_URL),
        consumer_key=_require_env(ENV_CONSUMER_KEY),
        consumer_secret=_require_env(ENV_CONSUMER_SECRET),
    )


def load_config_from_env(env_file: Optional[str] = None, **overrides) -> ClientConfig:
    """Build a ClientConfig from WC_* environment variables.

    ``WC_INSECURE_SKIP_TLS_VERIFY=1`` disables certificate verification and
    ``WC_REQUEST_TIMEOUT`` sets one timeout for connect, read and write.
    """
    credentials = load_credentials_from_env(env_file)

    timeout: Union[TimeoutConfig, float, None] = None
    raw_timeout = os.environ.get(ENV_REQUEST_TIMEOUT, "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise WooClientConfigError(
                f"{ENV_REQUEST_TIMEOUT} must be a number, got {raw_timeout!r}"
            ) from e

    options = {
        "timeout": timeout,
        "verify_tls": not _env_flag(ENV_INSECURE_SKIP_TLS_VERIFY),
    }
    options.update(overrides)
    return ClientConfig(credentials=credentials, **options)
