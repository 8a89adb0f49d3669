#!/usr/bin/env python3
"""
WooCommerce REST API - connection probe

Fetches one page of published products with the WC_* credentials and prints
a summary.

Usage:
    python -m woo_client [--page N] [--per-page N] [--env-file PATH] [--trace]

Environment:
  WC_STORE_URL                   - Store base URL, e.g. https://shop.example.com
  WC_CONSUMER_KEY                - REST API consumer key (ck_...)
  WC_CONSUMER_SECRET             - REST API consumer secret (cs_...)
  WC_REQUEST_TIMEOUT             - Timeout in seconds (optional)
  WC_INSECURE_SKIP_TLS_VERIFY=1  - Skip certificate checks (local test stores only)

Exit codes: 0 success, 1 fetch failure, 2 configuration error.
"""
import argparse
import logging
import sys
from typing import List, Optional

from console_print import print_error, print_info, print_success, print_table, print_warning

from .config import WooClientConfigError, load_config_from_env
from .core.base_client import SyncProductFetchClient
from .types import Failure

TITLE = "WooCommerce"
SUMMARY_COLUMNS = ["id", "name", "price", "stock_status"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="woo_client",
        description="Check WooCommerce REST API connectivity by fetching one page of products.",
    )
    parser.add_argument("--page", type=int, default=1, help="1-based page number (default: 1)")
    parser.add_argument("--per-page", type=int, default=10, help="products per page (default: 10)")
    parser.add_argument("--env-file", default=None, help="path to a .env file with WC_* variables")
    parser.add_argument("--trace", action="store_true", help="print request/response panels")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config_from_env(args.env_file, trace=args.trace)
    except WooClientConfigError as e:
        print_error(str(e), TITLE)
        return 2

    if not config.verify_tls:
        print_warning("TLS certificate verification disabled", TITLE)

    try:
        client = SyncProductFetchClient(config)
    except ValueError as e:
        print_error(f"Invalid configuration: {e}", TITLE)
        return 2

    print_info(f"Fetching page {args.page} ({args.per_page} per page) from {config.credentials.store_url}", TITLE)
    with client:
        try:
            result = client.fetch_page(page=args.page, page_size=args.per_page)
        except ValueError as e:
            print_error(str(e), TITLE)
            return 2

    if isinstance(result, Failure):
        print_error(f"{result.kind.value}: {result.message}", TITLE)
        return 1

    meta = result.pagination
    print_success("Connection successful!", TITLE)
    print_info(
        f"Found {len(result.items)} products on page {meta.current_page} "
        f"(total products: {meta.total_items}, total pages: {meta.total_pages})",
        TITLE,
    )
    if result.items:
        print_table(
            [{col: item.get(col, "") for col in SUMMARY_COLUMNS} for item in result.items],
            {"title": "Products", "columns": SUMMARY_COLUMNS},
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
