"""
COS (Cloud Object Storage) client with a standalone request signer

This package provides request canonicalization, q-sign-algorithm=sha1 request
signing and decoding of the service's XML envelopes, plus a thin client for
bucket and object operations.
"""

from .canonical import CanonicalRequest, canonicalize
from .client import Client
from .config import AppSettings, Credentials
from .decoder import decode, parse_bucket_list, parse_error
from .errors import (
    CosError,
    MalformedResponseError,
    ServiceError,
    SigningConfigurationError,
    TransportError,
)
from .models import Bucket, Outcome, Response
from .signer import AuthorizationParameters, Headers, Signer, SigningWindow
from .transport import RequestsTransport, Transport

__version__ = "0.1.0"
__all__ = [
    "AppSettings",
    "AuthorizationParameters",
    "Bucket",
    "CanonicalRequest",
    "Client",
    "CosError",
    "Credentials",
    "Headers",
    "MalformedResponseError",
    "Outcome",
    "RequestsTransport",
    "Response",
    "ServiceError",
    "Signer",
    "SigningConfigurationError",
    "SigningWindow",
    "Transport",
    "TransportError",
    "canonicalize",
    "decode",
    "parse_bucket_list",
    "parse_error",
]
