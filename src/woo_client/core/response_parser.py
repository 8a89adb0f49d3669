"""
Response classification for woo_client.

Turns a RawResponse into a FetchResult. Pure: no I/O and no client state, so
the sync and async clients share it.
"""
import json
import logging
from typing import Any, Mapping, Optional

from ..types import (
    ErrorKind,
    Failure,
    FetchResult,
    PaginationMeta,
    RawResponse,
    Success,
)

logger = logging.getLogger("woo_client.response_parser")

TOTAL_ITEMS_HEADER = "x-wp-total"
TOTAL_PAGES_HEADER = "x-wp-totalpages"
MAX_ERROR_BODY_CHARS = 500
# Longer counts are treated as garbage (and would trip int()'s digit limit)
MAX_COUNT_DIGITS = 18
UNEXPECTED_SHAPE_MESSAGE = "unexpected response shape"

# Keys that mark a JSON object as an application error payload
ERROR_PAYLOAD_KEYS = ("code", "message", "error")


def truncate(text: str, limit: int = MAX_ERROR_BODY_CHARS) -> str:
    """Cut text to ``limit`` characters, marking the cut with ``...``."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def parse_count_header(headers: Mapping[str, str], name: str) -> int:
    """Read a non-negative integer header; missing or malformed values are 0."""
    raw = _get_header(headers, name)
    if raw is None:
        return 0
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        logger.debug(f"parse_count_header: ignoring non-numeric {name}={raw[:32]!r}")
        return 0
    if len(raw) > MAX_COUNT_DIGITS:
        logger.debug(f"parse_count_header: ignoring oversized {name} ({len(raw)} digits)")
        return 0
    return int(raw)


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    if name in headers:
        return headers[name]
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def parse_pagination(headers: Mapping[str, str], current_page: int) -> PaginationMeta:
    """Pagination totals from the X-WP-Total / X-WP-TotalPages headers."""
    return PaginationMeta(
        total_items=parse_count_header(headers, TOTAL_ITEMS_HEADER),
        total_pages=parse_count_header(headers, TOTAL_PAGES_HEADER),
        current_page=current_page,
    )


def decode_body(body: bytes) -> str:
    """Decode a body as UTF-8, replacing invalid bytes (for error messages)."""
    return body.decode("utf-8", errors="replace")


def is_error_payload(payload: Any) -> bool:
    return isinstance(payload, dict) and any(key in payload for key in ERROR_PAYLOAD_KEYS)


def error_payload_message(payload: Mapping[str, Any]) -> str:
    """Prefer ``message``, then ``error``, then ``code``."""
    for key in ("message", "error", "code"):
        value = payload.get(key)
        if value:
            return value if isinstance(value, str) else json.dumps(value)
    return UNEXPECTED_SHAPE_MESSAGE


def parse_response(raw: RawResponse, current_page: int) -> FetchResult:
    """Classify one HTTP response into Success or a typed Failure."""
    if raw.status_code >= 400:
        return Failure(
            kind=ErrorKind.HTTP_ERROR,
            message=f"{raw.status_code}: {truncate(decode_body(raw.body))}",
        )

    pagination = parse_pagination(raw.headers, current_page)

    try:
        payload = json.loads(raw.body)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError subclasses;
        # RecursionError comes from pathologically nested arrays or objects
        return Failure(kind=ErrorKind.DECODE_ERROR, message=str(e) or type(e).__name__)

    if isinstance(payload, list):
        if not all(isinstance(item, dict) for item in payload):
            return Failure(kind=ErrorKind.UNEXPECTED_PAYLOAD, message=UNEXPECTED_SHAPE_MESSAGE)
        return Success(items=payload, pagination=pagination)

    if is_error_payload(payload):
        return Failure(kind=ErrorKind.API_ERROR, message=error_payload_message(payload))

    return Failure(kind=ErrorKind.UNEXPECTED_PAYLOAD, message=UNEXPECTED_SHAPE_MESSAGE)
