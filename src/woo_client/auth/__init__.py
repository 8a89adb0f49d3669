"""
Request signing for woo_client.
"""
from .oauth1 import (
    OAuth1Signer,
    build_base_string,
    build_signed_request,
    build_signing_key,
    compute_signature,
    generate_nonce,
    generate_timestamp,
    normalize_parameters,
    percent_encode,
    sign,
)

__all__ = [
    "OAuth1Signer",
    "build_base_string",
    "build_signed_request",
    "build_signing_key",
    "compute_signature",
    "generate_nonce",
    "generate_timestamp",
    "normalize_parameters",
    "percent_encode",
    "sign",
]
