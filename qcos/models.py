"""
Value types shared by the client, the transport and the response decoder.
"""

from dataclasses import dataclass, field
from typing import Generic, Mapping, Optional, TypeVar

from .errors import CosError

T = TypeVar('T')

COS_DOMAIN = 'myqcloud.com'


@dataclass(frozen=True)
class Bucket:
    app_id: str
    name: str
    region: str

    @property
    def full_name(self) -> str:
        return f"{self.name}-{self.app_id}"

    @property
    def url(self) -> str:
        """Virtual-hosted endpoint of the bucket, without a trailing slash."""
        return f"https://{self.full_name}.cos.{self.region}.{COS_DOMAIN}"


@dataclass(frozen=True)
class Response:
    """What a transport hands back for one request."""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b''


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a client operation: either a value or the error that prevented it.

    Callers that prefer exceptions can call ``unwrap()``.
    """
    value: Optional[T] = None
    error: Optional[CosError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'Outcome[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: CosError) -> 'Outcome[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error
        return self.value
