"""
Product list clients using httpx.

Both clients run the same per-call pipeline: build endpoint and query, sign,
dispatch one GET, classify the response. Transport and HTTP failures come
back as ``Failure`` values; nothing is retried.
"""
import logging
from typing import Optional, Tuple

import httpx
from rich.markup import escape

from console_print import mask_url, print_panel, redact

from ..auth.oauth1 import OAuth1Signer
from ..config import ClientConfig, ResolvedConfig, resolve_config
from ..types import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    ErrorKind,
    Failure,
    FetchResult,
    PageRequest,
    RawResponse,
    SignedRequest,
)
from .request_builder import build_products_endpoint, build_products_query
from .response_parser import parse_response

logger = logging.getLogger("woo_client.base_client")


def _build_timeout(config: ResolvedConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout.connect,
        read=config.timeout.read,
        write=config.timeout.write,
        pool=config.timeout.connect,
    )


def _to_raw_response(response: httpx.Response) -> RawResponse:
    return RawResponse.from_parts(
        status_code=response.status_code,
        headers=response.headers,
        body=response.content,
    )


def _network_failure(exc: Exception) -> Failure:
    message = str(exc) or type(exc).__name__
    return Failure(kind=ErrorKind.NETWORK, message=message)


class _ProductFetchBase:
    """Configuration, signing and result handling shared by both clients."""

    def __init__(self, config: ClientConfig, signer: Optional[OAuth1Signer] = None):
        self._config = resolve_config(config)
        self._signer = signer or OAuth1Signer(self._config.credentials)
        self._endpoint = build_products_endpoint(self._config.credentials.store_url)
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Client has been closed")

    def _prepare(self, page: int, page_size: int) -> Tuple[PageRequest, SignedRequest]:
        page_request = PageRequest(page=page, page_size=page_size)
        signed = self._signer.sign_request(self._endpoint, build_products_query(page_request))

        logger.debug(f"fetch_page: page={page}, page_size={page_size}, url={mask_url(signed.url)}")
        if self._config.trace:
            print_panel(
                f"[bold cyan]{signed.method}[/bold cyan] {escape(mask_url(signed.url))}",
                title="[bold blue]Request[/bold blue]",
            )
        return page_request, signed

    def _complete(self, page_request: PageRequest, response: httpx.Response) -> FetchResult:
        raw = _to_raw_response(response)
        if self._config.trace:
            color = "green" if raw.status_code < 400 else "red"
            print_panel(
                f"[bold {color}]{raw.status_code}[/bold {color}] {escape(response.reason_phrase or '')}",
                title=f"[bold blue]Response[/bold blue] ({escape(self._endpoint)})",
            )
        return self._finish(parse_response(raw, page_request.page))

    def _fail_network(self, exc: Exception) -> FetchResult:
        detail = redact(str(exc), self._config.credentials.consumer_secret)
        logger.warning(f"fetch_page: transport error {type(exc).__name__}: {detail}")
        return self._finish(_network_failure(exc))

    def _finish(self, result: FetchResult) -> FetchResult:
        if isinstance(result, Failure):
            message = redact(result.message, self._config.credentials.consumer_secret)
            result = Failure(kind=result.kind, message=message)
            logger.info(f"fetch_page: {result.kind.value}: {message[:200]}")
        else:
            logger.debug(
                f"fetch_page: {len(result.items)} items, "
                f"total_items={result.pagination.total_items}, "
                f"total_pages={result.pagination.total_pages}"
            )
        return result


class SyncProductFetchClient(_ProductFetchBase):
    """Synchronous products list client."""

    def __init__(
        self,
        config: ClientConfig,
        httpx_client: Optional[httpx.Client] = None,
        signer: Optional[OAuth1Signer] = None,
    ):
        super().__init__(config, signer)
        self._owns_client = httpx_client is None
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=_build_timeout(self._config),
                verify=self._config.verify_tls,
                headers=self._config.headers,
            )

    def fetch_page(self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> FetchResult:
        """Fetch one page of published products."""
        self._check_open()
        page_request, signed = self._prepare(page, page_size)

        try:
            response = self._client.get(signed.url, headers=self._config.headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            return self._fail_network(e)

        return self._complete(page_request, response)

    def close(self) -> None:
        """Close the client. Injected httpx clients are left open."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SyncProductFetchClient":
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit sync context manager."""
        self.close()


class AsyncProductFetchClient(_ProductFetchBase):
    """Asynchronous products list client.

    Cancelling ``fetch_page`` aborts the in-flight request and propagates
    ``asyncio.CancelledError``; no partial result is produced.
    """

    def __init__(
        self,
        config: ClientConfig,
        httpx_client: Optional[httpx.AsyncClient] = None,
        signer: Optional[OAuth1Signer] = None,
    ):
        super().__init__(config, signer)
        self._owns_client = httpx_client is None
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=_build_timeout(self._config),
                verify=self._config.verify_tls,
                headers=self._config.headers,
            )

    async def fetch_page(self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> FetchResult:
        """Fetch one page of published products."""
        self._check_open()
        page_request, signed = self._prepare(page, page_size)

        try:
            response = await self._client.get(signed.url, headers=self._config.headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            return self._fail_network(e)

        return self._complete(page_request, response)

    async def close(self) -> None:
        """Close the client. Injected httpx clients are left open."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncProductFetchClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()
