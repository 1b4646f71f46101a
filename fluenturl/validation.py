"""
Structural checks run by `Builder.build`.

Each check either returns the cleaned value or raises a `UrlBuilderError`
subclass; the builder turns those into a failed `BuildResult`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping, Sequence

from urllib3.exceptions import LocationParseError
from urllib3.util import Url, parse_url

from fluenturl.exceptions import (
    EmptyQueryKeyError,
    EmptyQueryValueError,
    ForbiddenHostSymbolsError,
    InvalidPortError,
    MalformedURLError,
    MissingHostError,
    MissingPasswordError,
    MissingUserError,
)

logger = logging.getLogger(__name__)

MAX_PORT = 65535
SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")


def check_host(host: str) -> str:
    """
    Reject a missing host or one that smuggles a scheme, path or port.

    This is a string-shape heuristic, not host grammar validation: a slash
    means a scheme or path was passed along, exactly one colon means a port
    was (a bare name or IPv4 address has none, an IPv6 literal has at least
    two). An IPv6 literal that also ends in a port passes unnoticed.

    Parameters
    ----------
    host
        Host as stored on the builder.

    Returns
    -------
    host
        The unchanged host.

    Raises
    ------
    MissingHostError
        If `host` is empty.
    ForbiddenHostSymbolsError
        If `host` contains ``"/"`` or exactly one ``":"``.
    """
    if not host:
        raise MissingHostError()
    if "/" in host or host.count(":") == 1:
        raise ForbiddenHostSymbolsError(host)
    return host


def check_port(port: int) -> int:
    """
    Return `port` if it is unset (0) or within [1, 65535].

    Raises
    ------
    InvalidPortError
        For any other value.
    """
    if port and not 1 <= port <= MAX_PORT:
        raise InvalidPortError(port)
    return port


def parse_base(scheme: str, host: str, port: int) -> Url:
    """
    Check the scheme, parse ``//host[:port]`` and return the base URL.

    The parser only validates the authority. The returned URL carries the
    lowercased scheme and the host exactly as given, not the parser's
    normalized form.

    Parameters
    ----------
    scheme
        URL scheme without separators.
    host
        Host that already passed `check_host`.
    port
        Port that already passed `check_port`; 0 means unset.

    Returns
    -------
    base
        URL with scheme, host and port set.

    Raises
    ------
    MalformedURLError
        If the scheme does not follow RFC 3986, the parser rejects the
        authority, or the host spills into userinfo, path, query or fragment.
    """
    if not SCHEME_RE.match(scheme):
        raise MalformedURLError(f"invalid scheme {scheme!r}")

    raw = f"//{host}"
    if port:
        raw = f"{raw}:{port}"

    try:
        parsed = parse_url(raw)
    except LocationParseError as e:
        raise MalformedURLError(f"cannot parse host {host!r}: {e}") from e

    if not parsed.host:
        raise MalformedURLError(f"cannot parse host {host!r}: no host found")

    # an empty userinfo ("@example.com") parses to auth=None
    if (
        "@" in host
        or parsed.auth is not None
        or parsed.path
        or parsed.query is not None
        or parsed.fragment is not None
    ):
        raise MalformedURLError(
            f"host {host!r} must not include userinfo, path, query or fragment"
        )

    return parsed._replace(scheme=scheme.lower(), host=host)


def check_credentials(user: str, password: str) -> tuple[str, str]:
    if not user:
        raise MissingUserError()
    if not password:
        raise MissingPasswordError()
    return user, password


def iter_query_pairs(
    query: Mapping[str, Sequence[str]], *, strict: bool = False
) -> Iterator[tuple[str, str]]:
    """
    Flatten a key -> values mapping into ``(key, value)`` pairs.

    Keys come out in mapping order, values in the order they were added.
    By default empty keys and empty values are skipped. With `strict` they
    raise instead.

    Parameters
    ----------
    query
        Raw query parameters.
    strict
        Fail on empty keys/values instead of skipping them.

    Yields
    ------
    pair
        Raw ``(key, value)`` tuples.

    Raises
    ------
    EmptyQueryKeyError
        If `strict` and a key is empty.
    EmptyQueryValueError
        If `strict` and a value is empty.
    """
    for key, values in query.items():
        if not key:
            if strict:
                raise EmptyQueryKeyError()
            logger.debug("skipping query values %r with empty key", list(values))
            continue
        for value in values:
            if not value:
                if strict:
                    raise EmptyQueryValueError(key)
                logger.debug("skipping empty query value for key %r", key)
                continue
            yield key, value
