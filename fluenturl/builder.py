# fluent builder for absolute URLs

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from fluenturl.encoding import (
    encode_fragment,
    encode_query,
    encode_userinfo,
    join_path,
    serialize,
)
from fluenturl.exceptions import UrlBuilderError
from fluenturl.validation import (
    check_credentials,
    check_host,
    check_port,
    iter_query_pairs,
    parse_base,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """
    User name and password placed in the URL authority.

    Parameters
    ----------
    user
        User name.
    password
        Password.
    """

    user: str
    password: str


class BuildResult(NamedTuple):
    """
    Outcome of `Builder.build`.

    Unpacks as ``url, error``. On success `error` is None; on failure `url`
    is an empty string and must not be used.
    """

    url: str
    error: UrlBuilderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """
        Return the URL or raise the carried error.

        Raises
        ------
        UrlBuilderError
            If the build failed.
        """
        if self.error is not None:
            raise self.error
        return self.url


@dataclass
class Builder:
    """
    Accumulates URL components and assembles them into an absolute URL.

    Setters never fail and return the builder itself, so calls can be
    chained. All validation happens in `build`.

    Parameters
    ----------
    scheme
        URL scheme, ``"http"`` unless changed.
    host
        Domain name, IPv4 address or bracketed IPv6 address. Required.
    port
        Port number; 0 leaves it out of the URL.
    credentials
        Optional user name and password.
    anchor
        Fragment without the leading ``"#"``.
    strict_query
        If True, empty query keys or values fail the build instead of being
        left out.

    Attributes
    ----------
    path
        Raw path segments, filled only through `add_path`.
    query
        Raw query values per key in insertion order, filled only through
        `add_query`.

    Examples
    --------
    >>> Builder().set_scheme_https().set_domain("example.com").add_path("a b").build_or_raise()
    'https://example.com/a%20b'
    """

    scheme: str = "http"
    host: str = ""
    port: int = 0
    credentials: Credentials | None = None
    path: list[str] = field(default_factory=list, init=False)
    query: dict[str, list[str]] = field(default_factory=dict, init=False)
    anchor: str = ""
    strict_query: bool = False

    def set_scheme(self, scheme: str) -> Builder:
        """Set the scheme, e.g. ``"https"`` or ``"ftp://"``. Not validated."""
        self.scheme = scheme.strip(":/")
        return self

    def set_scheme_http(self) -> Builder:
        self.scheme = "http"
        return self

    def set_scheme_https(self) -> Builder:
        self.scheme = "https"
        return self

    def set_domain(self, domain: str) -> Builder:
        """
        Set a domain name as host.

        `build` fails if the value contains ``"/"`` or a single ``":"``.
        """
        self.host = domain.removesuffix("/")
        return self

    def set_ipv4(self, address: str) -> Builder:
        """Set an IPv4 address as host. The address shape is not checked."""
        self.host = address.removesuffix("/")
        return self

    def set_ipv6(self, address: str) -> Builder:
        """
        Set an IPv6 address as host, adding brackets.

        Brackets already present are dropped and put back. A port written
        inside the address cannot be detected and ends up in the host.
        """
        address = address.removesuffix("/").strip("[]")
        self.host = f"[{address}]"
        return self

    def set_port(self, port: int) -> Builder:
        """Set the port. `build` fails unless it is in [1, 65535]; 0 unsets it."""
        self.port = port
        return self

    def set_credentials(self, user: str, password: str) -> Builder:
        """Set user and password. `build` fails if either is empty."""
        self.credentials = Credentials(user=user, password=password)
        return self

    def add_path(self, *segments: str) -> Builder:
        """
        Append path segments.

        Repeated calls extend the path. Each segment is encoded as a whole,
        so ``"a/b"`` is one segment, not two.
        """
        self.path.extend(segments)
        return self

    def add_query(self, key: str, *values: str) -> Builder:
        """Append values to the query parameter `key`."""
        self.query.setdefault(key, []).extend(values)
        return self

    def set_anchor(self, anchor: str) -> Builder:
        self.anchor = anchor.strip("#/")
        return self

    def build(self) -> BuildResult:
        """
        Validate the collected parts and assemble the URL.

        The builder is not modified; calling `build` again without changes
        gives the same result.

        Returns
        -------
        result
            ``BuildResult(url, None)`` on success, ``BuildResult("", error)``
            otherwise.
        """
        try:
            url = self._assemble()
        except UrlBuilderError as e:
            logger.debug("URL build rejected: %s", e)
            return BuildResult("", e)
        return BuildResult(url)

    def build_or_raise(self) -> str:
        """Like `build`, but raise the error instead of returning it."""
        return self.build().unwrap()

    def _assemble(self) -> str:
        host = check_host(self.host)
        port = check_port(self.port)
        base = parse_base(self.scheme, host, port)

        userinfo = None
        if self.credentials is not None:
            user, password = check_credentials(
                self.credentials.user, self.credentials.password
            )
            userinfo = encode_userinfo(user, password)

        query = encode_query(iter_query_pairs(self.query, strict=self.strict_query))

        return serialize(
            base,
            userinfo=userinfo,
            path=join_path(self.path),
            query=query,
            fragment=encode_fragment(self.anchor),
        )
