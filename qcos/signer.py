"""
COS request signing (q-sign-algorithm=sha1).

The signing key is derived from the secret key and a 30 second validity
window, then used to sign the SHA1 of the canonical request.
"""

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlsplit

from .canonical import CanonicalRequest
from .config import Credentials
from .errors import SigningConfigurationError

Headers = Dict[str, str]

ALGORITHM = 'sha1'
WINDOW_SECONDS = 30

_DEFAULT_PORTS = {'http': 80, 'https': 443}


@dataclass(frozen=True)
class SigningWindow:
    start: int
    end: int

    @classmethod
    def starting_at(cls, now: float) -> 'SigningWindow':
        start = int(now)
        return cls(start, start + WINDOW_SECONDS)

    def __str__(self) -> str:
        return f"{self.start};{self.end}"


@dataclass(frozen=True)
class AuthorizationParameters:
    algorithm: str
    access_key_id: str
    sign_time: str
    key_time: str
    signed_header_list: str
    signed_param_list: str
    signature: str

    def items(self) -> List[Tuple[str, str]]:
        # Field order is what the service's parser expects
        return [
            ('q-sign-algorithm', self.algorithm),
            ('q-ak', self.access_key_id),
            ('q-sign-time', self.sign_time),
            ('q-key-time', self.key_time),
            ('q-header-list', self.signed_header_list),
            ('q-url-param-list', self.signed_param_list),
            ('q-signature', self.signature),
        ]

    def render(self) -> str:
        return '&'.join(f"{k}={v}" for k, v in self.items())


def _hmac_sha1(key: str, message: str) -> str:
    try:
        return hmac.new(key.encode('utf-8'), message.encode('utf-8'), hashlib.sha1).hexdigest()
    except ValueError as e:
        raise SigningConfigurationError(f"HMAC-SHA1 unavailable: {e}") from e


def _sha1(message: str) -> str:
    try:
        return hashlib.sha1(message.encode('utf-8')).hexdigest()
    except ValueError as e:
        raise SigningConfigurationError(f"SHA1 unavailable: {e}") from e


def host_header(url: str) -> str:
    """Host header value for ``url``: the host, plus the port when it is not the scheme default."""
    parts = urlsplit(url)
    host = parts.hostname
    if not host:
        raise ValueError(f"URL has no host: {url!r}")
    if ':' in host:
        host = f"[{host}]"
    port = parts.port
    if port and port != _DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    return host


class Signer:
    """
    Signs canonical requests with a fixed key pair.

    Holds no per-request state; concurrent callers each get their own window
    from the clock.
    """

    def __init__(self, credentials: Credentials, clock: Optional[Callable[[], float]] = None) -> None:
        if not isinstance(credentials, Credentials):
            raise SigningConfigurationError("credentials must be a Credentials instance")
        self.credentials = credentials
        self.clock = clock

    def sign(self, canonical: CanonicalRequest, now: Optional[float] = None) -> AuthorizationParameters:
        if now is None:
            now = self.clock() if self.clock is not None else time.time()
        window = SigningWindow.starting_at(now)
        sign_time = str(window)

        sign_key = _hmac_sha1(self.credentials.secret_key, sign_time)
        string_to_sign = f"{ALGORITHM}\n{sign_time}\n{_sha1(str(canonical))}\n"
        signature = _hmac_sha1(sign_key, string_to_sign)

        return AuthorizationParameters(
            algorithm=ALGORITHM,
            access_key_id=self.credentials.secret_id,
            sign_time=sign_time,
            key_time=sign_time,
            signed_header_list=canonical.signed_header_list,
            signed_param_list=canonical.signed_param_list,
            signature=signature
        )

    def authorization(self, canonical: CanonicalRequest, now: Optional[float] = None) -> str:
        return self.sign(canonical, now).render()

    def create_headers(
            self,
            method: str,
            url: str,
            headers: Optional[Mapping[str, str]] = None,
            now: Optional[float] = None
    ) -> Headers:
        """
        Return a copy of ``headers`` with ``Host`` set from ``url`` and an
        ``Authorization`` header signing all of them. The returned headers are
        exactly the ones that must be sent.

        Values are stripped of surrounding whitespace, which servers drop on
        receipt. Names are case-insensitive: passing the same name twice in
        different casings raises ValueError.
        """
        signed: Headers = {}
        seen = set()
        for name, value in (headers or {}).items():
            key = name.lower()
            if key in seen:
                raise ValueError(f"Duplicate header {name!r}")
            seen.add(key)
            if key not in ('host', 'authorization'):
                signed[name] = str(value).strip()
        signed['Host'] = host_header(url)
        canonical = CanonicalRequest.from_url(method, url, signed)
        signed['Authorization'] = self.authorization(canonical, now)
        return signed
