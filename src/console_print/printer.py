"""
Console printing and masking helpers backed by Rich.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel as RichPanel
from rich.table import Table as RichTable

# Query parameters whose values never reach a console or a log record verbatim
SENSITIVE_QUERY_PARAMS = frozenset({
    "key",
    "token",
    "secret",
    "password",
    "api_key",
    "consumer_key",
    "consumer_secret",
    "oauth_consumer_key",
    "oauth_signature",
    "oauth_nonce",
})

console = RichConsole()


def _normalize_options(options_or_title: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """Accept either a title string or an options dict."""
    if options_or_title is None:
        return {}
    if isinstance(options_or_title, str):
        return {"title": options_or_title}
    return dict(options_or_title)


# =============================================================================
# Sensitive Data Masking
# =============================================================================


def mask_sensitive(
    value: Optional[str],
    options_or_show_chars: Union[int, Dict[str, Any], None] = None,
) -> str:
    """
    Mask sensitive values for logging.

    Args:
        value: Value to mask
        options_or_show_chars: Number of chars to show, or options dict
            - show_chars: Number of characters to show before masking (default: 4)
            - mask_char: Character to use for masking (default: '*')
            - placeholder: Placeholder for null/empty values (default: '<none>')

    Returns:
        str: Masked value
    """
    if isinstance(options_or_show_chars, int):
        options = {"show_chars": options_or_show_chars}
    else:
        options = _normalize_options(options_or_show_chars)

    show_chars = options.get("show_chars", 4)
    mask_char = options.get("mask_char", "*")
    placeholder = options.get("placeholder", "<none>")

    if not value:
        return placeholder
    if len(value) <= show_chars:
        return mask_char * len(value)
    return value[:show_chars] + "***"


def mask_url(url: Optional[str]) -> str:
    """
    Mask a URL by hiding the password and sensitive query parameters.

    Signed request URLs carry the consumer key, nonce and signature in the
    query string; those values are replaced with ``****``.
    """
    if not url:
        return "<none>"

    parsed = urlparse(url)

    if parsed.password:
        netloc = parsed.netloc.replace(f":{parsed.password}@", ":****@")
    else:
        netloc = parsed.netloc

    query = parsed.query
    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        query = urlencode([
            (name, "****" if name.lower() in SENSITIVE_QUERY_PARAMS else value)
            for name, value in pairs
        ])

    return urlunparse((
        parsed.scheme,
        netloc,
        parsed.path,
        parsed.params,
        query,
        parsed.fragment,
    ))


def redact(text: str, *secrets: Optional[str]) -> str:
    """Replace every occurrence of the given secret values in text."""
    for secret in secrets:
        if secret:
            text = text.replace(secret, "****")
    return text


# =============================================================================
# Status Messages
# =============================================================================


def _print_status(label: str, style: str, message: str, title: Optional[str]) -> None:
    tag = f"[{label}:{title}]" if title else f"[{label}]"
    console.print(f"[{style}]{escape(tag)}[/{style}] {escape(message)}")


def print_info(message: str, options_or_title: Union[str, Dict[str, Any], None] = None) -> None:
    """Print an info message: ``[INFO:title] message``."""
    _print_status("INFO", "blue", message, _normalize_options(options_or_title).get("title"))


def print_success(message: str, options_or_title: Union[str, Dict[str, Any], None] = None) -> None:
    """Print a success message: ``[OK:title] message``."""
    _print_status("OK", "green", message, _normalize_options(options_or_title).get("title"))


def print_warning(message: str, options_or_title: Union[str, Dict[str, Any], None] = None) -> None:
    """Print a warning message: ``[WARN:title] message``."""
    _print_status("WARN", "yellow", message, _normalize_options(options_or_title).get("title"))


def print_error(message: str, options_or_title: Union[str, Dict[str, Any], None] = None) -> None:
    """Print an error message: ``[ERROR:title] message``."""
    _print_status("ERROR", "red", message, _normalize_options(options_or_title).get("title"))


# =============================================================================
# Tables and Panels
# =============================================================================


def print_table(
    data: List[Dict[str, Any]],
    options_or_title: Union[str, Dict[str, Any], None] = None,
) -> None:
    """
    Print a list of dicts as a table.

    Options:
        - title: Table title
        - columns: Column names (defaults to keys from the first row)
    """
    options = _normalize_options(options_or_title)

    if not data:
        console.print("(empty table)")
        return

    cols = options.get("columns") or list(data[0].keys())
    table = RichTable(title=options.get("title"))
    for col in cols:
        table.add_column(col, style="cyan")
    for row in data:
        table.add_row(*[escape(str(row.get(col, ""))) for col in cols])
    console.print(table)


def print_panel(
    content: str,
    options_or_title: Union[str, Dict[str, Any], None] = None,
    *,
    title: Optional[str] = None,
) -> None:
    """Print content in a bordered panel. ``title`` supports Rich markup."""
    options = _normalize_options(options_or_title)
    title = title if title is not None else options.get("title")
    console.print(RichPanel(content, title=title))

