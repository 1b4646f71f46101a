# fluenturl/encoding.py
from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote, urlencode

from urllib3.util import Url

# RFC 3986 sub-delims; unreserved characters are never quoted by `quote`.
SUB_DELIMS = "!$&'()*+,;="
USERINFO_SAFE = SUB_DELIMS
PCHAR_SAFE = SUB_DELIMS + ":@"
FRAGMENT_SAFE = PCHAR_SAFE + "/?"


def encode_userinfo(user: str, password: str) -> str:
    """
    Percent-encode a user/password pair as RFC 3986 userinfo.

    ``":"`` is escaped in both parts since it separates user from password.

    Parameters
    ----------
    user
        Raw user name.
    password
        Raw password.

    Returns
    -------
    userinfo
        ``"user:password"`` with both parts escaped.
    """
    return f"{quote(user, safe=USERINFO_SAFE)}:{quote(password, safe=USERINFO_SAFE)}"


def join_path(segments: Iterable[str]) -> str:
    """
    Join raw path segments into an encoded absolute path.

    Each segment is escaped on its own, so a ``"/"`` inside a segment becomes
    ``"%2F"`` instead of starting a new segment. Spaces become ``"%20"``.
    Empty segments are ignored.

    Parameters
    ----------
    segments
        Raw (unencoded) path segments, in order.

    Returns
    -------
    path
        ``"/seg1/seg2"``, or ``""`` if no non-empty segment was given.
    """
    cleaned = [quote(s, safe=PCHAR_SAFE) for s in segments if s]
    return "/" + "/".join(cleaned) if cleaned else ""


def encode_query(pairs: Iterable[tuple[str, str]]) -> str:
    """Encode key/value pairs as application/x-www-form-urlencoded."""
    return urlencode(list(pairs))


def encode_fragment(fragment: str) -> str:
    return quote(fragment, safe=FRAGMENT_SAFE)


def serialize(
    base: Url,
    *,
    userinfo: str | None = None,
    path: str = "",
    query: str = "",
    fragment: str = "",
) -> str:
    """
    Attach already encoded parts to a parsed base URL and render it.

    Parameters
    ----------
    base
        Parsed ``scheme://host[:port]``.
    userinfo
        Encoded ``user:password`` or None.
    path
        Encoded path starting with ``"/"``, or empty.
    query
        Encoded query without the leading ``"?"``, or empty.
    fragment
        Encoded fragment without the leading ``"#"``, or empty.

    Returns
    -------
    url
        ``scheme://[userinfo@]host[:port][path][?query][#fragment]``.
    """
    full = base._replace(
        auth=userinfo,
        path=path or None,
        query=query or None,
        fragment=fragment or None,
    )
    return full.url
