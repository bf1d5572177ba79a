"""
Decoding of COS XML response envelopes.

Error bodies look like::

    <Error>
      <Code>AccessDenied</Code>
      <Message>Forbidden</Message>
      <Resource>examplebucket-1250000000.cos.ap-guangzhou.myqcloud.com/</Resource>
      <RequestId>NWQ...</RequestId>
      <TraceId>OGVm...</TraceId>
    </Error>
"""

from typing import Callable, Collection, List, Optional, Tuple, TypeVar, Union
from xml.etree import ElementTree as ET

from .errors import MalformedResponseError, ServiceError
from .models import Bucket, Outcome, Response

T = TypeVar('T')

Body = Union[str, bytes]


def _raw(body: Body) -> bytes:
    return body.encode('utf-8') if isinstance(body, str) else bytes(body)


def _parse_xml(raw: bytes, status_code: Optional[int] = None) -> ET.Element:
    try:
        return ET.fromstring(raw)
    except ET.ParseError as e:
        raise MalformedResponseError(f"Response body is not well-formed XML: {e}", status_code, raw) from e


def _text(elem: ET.Element, tag: str) -> Optional[str]:
    child = elem.find(tag)
    if child is None:
        return None
    return child.text or ''


def parse_error(status_code: int, body: Body) -> ServiceError:
    """Decode an ``Error`` envelope into a ServiceError for ``status_code``."""
    body = _raw(body)
    root = _parse_xml(body, status_code)
    error = root if root.tag == 'Error' else root.find('.//Error')
    if error is None:
        raise MalformedResponseError("Response body has no Error element", status_code, body)
    code = _text(error, 'Code')
    if not code:
        raise MalformedResponseError("Error element has no Code", status_code, body)
    return ServiceError(
        status_code=status_code,
        code=code,
        message=_text(error, 'Message') or '',
        resource=_text(error, 'Resource') or '',
        request_id=_text(error, 'RequestId') or '',
        trace_id=_text(error, 'TraceId') or ''
    )


def split_bucket_name(full_name: str, status_code: Optional[int] = None, body: bytes = b'') -> Tuple[str, str]:
    """
    Split ``name-appid`` on its last hyphen. Names without a hyphen do not
    follow the service's naming convention and are rejected.
    """
    name, sep, app_id = full_name.rpartition('-')
    if not sep or not name or not app_id:
        raise MalformedResponseError(f"Bucket name {full_name!r} is not of the form name-appid", status_code, body)
    return name, app_id


def parse_bucket_list(body: Body) -> List[Bucket]:
    body = _raw(body)
    root = _parse_xml(body, 200)
    container = root if root.tag == 'Buckets' else root.find('.//Buckets')
    if container is None:
        raise MalformedResponseError("Response body has no Buckets element", 200, body)
    buckets = []
    for elem in container.iterfind('Bucket'):
        full_name = _text(elem, 'Name')
        region = _text(elem, 'Location')
        if not full_name or region is None:
            raise MalformedResponseError("Bucket entry is missing Name or Location", 200, body)
        name, app_id = split_bucket_name(full_name, 200, body)
        buckets.append(Bucket(app_id=app_id, name=name, region=region))
    return buckets


def decode(
        response: Response,
        success: Collection[int] = (200,),
        parse: Optional[Callable[[bytes], T]] = None
) -> 'Outcome[T]':
    """
    Turn a transport response into an Outcome: a ServiceError for any status
    outside ``success``, otherwise ``parse(body)`` (or None without a parser).
    Undecodable bodies on either path yield a MalformedResponseError.
    """
    try:
        if response.status_code not in success:
            return Outcome.failure(parse_error(response.status_code, response.body))
        return Outcome.success(parse(response.body) if parse is not None else None)
    except MalformedResponseError as e:
        if e.status_code is None:
            e.status_code = response.status_code
        return Outcome.failure(e)

