"""
HTTP transport collaborator.

The client never opens connections itself; it hands fully signed requests to
an object with a ``send`` method. ``RequestsTransport`` is the default,
backed by a ``requests.Session``.
"""

import logging
from typing import BinaryIO, Mapping, Optional, Protocol, Union

import requests

from .errors import TransportError
from .models import Response

logger = logging.getLogger(__name__)

Body = Union[bytes, BinaryIO, None]

DEFAULT_TIMEOUT = 30


class Transport(Protocol):
    def send(
            self,
            method: str,
            url: str,
            headers: Mapping[str, str],
            body: Body = None
    ) -> Response:
        ...


class RequestsTransport:
    """Sends requests through a ``requests.Session`` owned by the caller or created here."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(
            self,
            method: str,
            url: str,
            headers: Mapping[str, str],
            body: Body = None
    ) -> Response:
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}", e) from e
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return Response(resp.status_code, dict(resp.headers), resp.content)

    def close(self) -> None:
        self.session.close()
