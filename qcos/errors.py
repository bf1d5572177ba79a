"""
Error types raised or returned by the COS client.
"""

from typing import Optional


class CosError(Exception):
    """Base class for every error surfaced by this package."""


class SigningConfigurationError(CosError):
    """Credentials or hashing primitives are unusable. Never retried."""


class TransportError(CosError):
    """The transport could not complete the exchange (connection, timeout)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class MalformedResponseError(CosError):
    """The response body could not be decoded into the expected envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: bytes = b'') -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ServiceError(CosError):
    """Error envelope returned by the storage service."""

    def __init__(
            self,
            status_code: int,
            code: str,
            message: str = '',
            resource: str = '',
            request_id: str = '',
            trace_id: str = ''
    ) -> None:
        super().__init__(f"{code} ({status_code}): {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.resource = resource
        self.request_id = request_id
        self.trace_id = trace_id

    def __repr__(self) -> str:
        return (
            f"ServiceError(status_code={self.status_code!r}, code={self.code!r}, "
            f"message={self.message!r}, request_id={self.request_id!r})"
        )
