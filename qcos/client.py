"""
COS client: bucket and object operations on top of the signer and decoder.
"""

import logging
from typing import BinaryIO, Callable, Collection, List, Mapping, Optional, TypeVar, Union

from .config import AppSettings
from .decoder import decode, parse_bucket_list
from .errors import TransportError
from .models import Bucket, Outcome, Response
from .signer import Signer
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar('T')

SERVICE_ENDPOINT = 'https://service.cos.myqcloud.com/'

OK = (200,)
OK_OR_NO_CONTENT = (200, 204)


class Client:
    """
    Executes signed requests against COS.

    Every operation returns an Outcome. Only configuration problems (bad
    credentials, missing arguments) are raised.
    """

    def __init__(
            self,
            settings: AppSettings,
            transport: Optional[Transport] = None,
            clock: Optional[Callable[[], float]] = None
    ) -> None:
        self.settings = settings
        self.signer = Signer(settings.credentials, clock)
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else RequestsTransport()

    def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> 'Client':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_buckets(self) -> Outcome[List[Bucket]]:
        """All buckets of the account."""
        return self._call('GET', SERVICE_ENDPOINT, parse=parse_bucket_list)

    def put_bucket(
            self,
            name: str,
            region: str,
            headers: Optional[Mapping[str, str]] = None
    ) -> Outcome[Bucket]:
        """Create bucket ``name`` in ``region``. Extra headers (e.g. x-cos-acl) are signed and sent."""
        bucket = Bucket(self.settings.app_id, name, region)
        return self._call('PUT', bucket.url + '/', headers, parse=lambda _: bucket)

    def delete_bucket(self, name: str, region: str) -> Outcome[None]:
        bucket = Bucket(self.settings.app_id, name, region)
        return self._call('DELETE', bucket.url + '/', success=OK_OR_NO_CONTENT)

    def put_object(
            self,
            url: str,
            content: Union[bytes, BinaryIO],
            headers: Optional[Mapping[str, str]] = None
    ) -> Outcome[None]:
        if content is None:
            raise ValueError("content is required")
        return self._call('PUT', url, headers, body=content)

    def get_object(self, url: str) -> Outcome[bytes]:
        return self._call('GET', url, parse=bytes)

    def delete_object(self, url: str) -> Outcome[None]:
        return self._call('DELETE', url, success=OK_OR_NO_CONTENT)

    def _send(
            self,
            method: str,
            url: str,
            headers: Optional[Mapping[str, str]] = None,
            body: Union[bytes, BinaryIO, None] = None
    ) -> Response:
        signed = self.signer.create_headers(method, url, headers)
        return self.transport.send(method, url, signed, body)

    def _call(
            self,
            method: str,
            url: str,
            headers: Optional[Mapping[str, str]] = None,
            body: Union[bytes, BinaryIO, None] = None,
            success: Collection[int] = OK,
            parse: Optional[Callable[[bytes], T]] = None
    ) -> Outcome[T]:
        try:
            response = self._send(method, url, headers, body)
        except TransportError as e:
            return Outcome.failure(e)
        outcome = decode(response, success, parse)
        logger.debug("%s %s: status %d, ok=%s", method, url, response.status_code, outcome.ok)
        return outcome
