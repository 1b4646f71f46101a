# central source for errors reported by fluenturl

from dataclasses import dataclass


class UrlBuilderError(Exception):
    """Base exception for fluenturl."""


class MissingHostError(UrlBuilderError, ValueError):
    """Raised when no host was set on the builder."""

    def __init__(self, message: str = "host is required") -> None:
        super().__init__(message)


@dataclass
class ForbiddenHostSymbolsError(UrlBuilderError, ValueError):
    """Raised when the host looks like it carries a scheme, path or port."""

    host: str

    def __str__(self) -> str:
        return f"host contains forbidden symbols: {self.host!r}"


@dataclass
class InvalidPortError(UrlBuilderError, ValueError):
    """Raised when the port is outside [1, 65535]."""

    port: int

    def __str__(self) -> str:
        return f"port must be in range [1, 65535], got {self.port}"


class MalformedURLError(UrlBuilderError, ValueError):
    """Raised when the assembled base URL cannot be parsed."""


class MissingUserError(UrlBuilderError, ValueError):
    """Raised when credentials were given without a user."""

    def __init__(self, message: str = "user not set") -> None:
        super().__init__(message)


class MissingPasswordError(UrlBuilderError, ValueError):
    """Raised when credentials were given without a password."""

    def __init__(self, message: str = "password not set") -> None:
        super().__init__(message)


class EmptyQueryKeyError(UrlBuilderError, ValueError):
    """Raised in strict query mode when a query key is empty."""

    def __init__(self, message: str = "query key is empty") -> None:
        super().__init__(message)


@dataclass
class EmptyQueryValueError(UrlBuilderError, ValueError):
    """Raised in strict query mode when a query value is empty."""

    key: str

    def __str__(self) -> str:
        return f"empty query value for key {self.key!r}"
