"""
console_print - Rich console output and masking helpers.

    from console_print import print_success, print_error, mask_url

    print_success('Connected', 'WooCommerce')
    print_error('HTTP 401', 'WooCommerce')
    logger.debug(f"GET {mask_url(signed_url)}")
"""
from .printer import (
    SENSITIVE_QUERY_PARAMS,
    console,
    mask_sensitive,
    mask_url,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_table,
    print_warning,
    redact,
)

__all__ = [
    "SENSITIVE_QUERY_PARAMS",
    "console",
    "mask_sensitive",
    "mask_url",
    "redact",
    "print_info",
    "print_success",
    "print_warning",
    "print_error",
    "print_table",
    "print_panel",
]
