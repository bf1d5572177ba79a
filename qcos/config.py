"""
Key configuration for the COS client.
"""

from dataclasses import dataclass

from .errors import SigningConfigurationError


def _require(name: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise SigningConfigurationError(f"{name} must be a non-empty string")


@dataclass(frozen=True)
class Credentials:
    secret_id: str
    secret_key: str

    def __post_init__(self) -> None:
        _require('secret_id', self.secret_id)
        _require('secret_key', self.secret_key)

    def __repr__(self) -> str:
        return f"Credentials(secret_id={self.secret_id!r}, secret_key='***')"


@dataclass(frozen=True)
class AppSettings:
    """Account settings: the app id suffixed to bucket names and the key pair."""
    app_id: str
    secret_id: str
    secret_key: str

    def __post_init__(self) -> None:
        _require('app_id', self.app_id)

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.secret_id, self.secret_key)

    def __repr__(self) -> str:
        return f"AppSettings(app_id={self.app_id!r}, secret_id={self.secret_id!r}, secret_key='***')"
