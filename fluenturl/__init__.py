"""
fluenturl: Fluent construction of well-formed absolute URLs.

Collect scheme, host, port, credentials, path segments, query parameters and
fragment on a `Builder`, then call `Builder.build` to validate and encode them.
"""

import importlib.metadata

try:
    # Installed package will find its version
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    # Repository clones will register an unknown version
    __version__ = "0.0.0+unknown"

from fluenturl.builder import Builder, BuildResult, Credentials
from fluenturl.exceptions import (
    EmptyQueryKeyError,
    EmptyQueryValueError,
    ForbiddenHostSymbolsError,
    InvalidPortError,
    MalformedURLError,
    MissingHostError,
    MissingPasswordError,
    MissingUserError,
    UrlBuilderError,
)

__all__ = [
    "Builder",
    "BuildResult",
    "Credentials",
    "UrlBuilderError",
    "MissingHostError",
    "ForbiddenHostSymbolsError",
    "InvalidPortError",
    "MalformedURLError",
    "MissingUserError",
    "MissingPasswordError",
    "EmptyQueryKeyError",
    "EmptyQueryValueError",
]
