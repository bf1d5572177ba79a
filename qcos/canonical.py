"""
Request canonicalization for COS request signing.

The canonical form is four newline-terminated lines (method, path, query,
headers), even when a line is empty. Method is lower-cased; query and headers
are lower-cased ``key=value`` pairs sorted by key and joined with ``&``.
Header values are URL-escaped before lower-casing.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union
from urllib.parse import parse_qsl, quote, unquote, urlsplit

Pair = Tuple[str, str]
Query = Union[str, Mapping[str, str], Iterable[Pair], None]

# RFC 3986 unreserved characters, left bare by the escaping
_UNRESERVED = '-_.~'


def escape_header_value(value: str) -> str:
    return quote(str(value), safe=_UNRESERVED).lower()


def _pairs(items: Union[Mapping[str, str], Iterable[Pair]]) -> Iterable[Pair]:
    if isinstance(items, Mapping):
        return items.items()
    return items


def _query_pairs(query: Query) -> Iterable[Pair]:
    if not query:
        return []
    if isinstance(query, str):
        return parse_qsl(query.lstrip('?'), keep_blank_values=True)
    return _pairs(query)


def _join(pairs: Tuple[Pair, ...]) -> str:
    return '&'.join(f"{k}={v}" for k, v in pairs)


@dataclass(frozen=True)
class CanonicalRequest:
    method: str
    path: str
    query: Tuple[Pair, ...]
    headers: Tuple[Pair, ...]

    @classmethod
    def from_url(cls, method: str, url: str, headers: Mapping[str, str]) -> 'CanonicalRequest':
        """Canonicalize a request for ``url``; the path is taken URL-decoded."""
        parts = urlsplit(url)
        return canonicalize(method, unquote(parts.path) or '/', parts.query, headers)

    @property
    def signed_header_list(self) -> str:
        return ';'.join(k for k, _ in self.headers)

    @property
    def signed_param_list(self) -> str:
        return ';'.join(k for k, _ in self.query)

    def __str__(self) -> str:
        return f"{self.method}\n{self.path}\n{_join(self.query)}\n{_join(self.headers)}\n"


def canonicalize(
        method: str,
        path: str,
        query: Query = None,
        headers: Union[Mapping[str, str], Iterable[Pair], None] = None
) -> CanonicalRequest:
    """
    Build the canonical form of a request. Pure: the same input always yields
    the same result, whatever the ordering or casing of query and headers.
    """
    sorted_query = sorted(
        ((str(k).lower(), str(v).lower()) for k, v in _query_pairs(query)),
        key=lambda pair: pair[0]
    )
    sorted_headers = sorted(
        ((str(k).lower(), escape_header_value(v)) for k, v in _pairs(headers or {})),
        key=lambda pair: pair[0]
    )
    return CanonicalRequest(
        method=method.lower(),
        path=path,
        query=tuple(sorted_query),
        headers=tuple(sorted_headers)
    )
