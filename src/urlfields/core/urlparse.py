"""Permissive URL decomposition.

parse_url() splits a URL reference into the components of ParsedURL. The
grammar is deliberately forgiving: a scheme is optional and most strings
parse (a bare "example.com" becomes a path). Only structurally broken input
is rejected:

- lone surrogate characters anywhere
- control characters anywhere before the fragment
- a ":" with nothing before it where a scheme would be
- a colon in the first segment of a scheme-less relative path
- malformed percent escapes in the path, host, userinfo or fragment
- host characters outside the host alphabet
- a non-numeric port
- invalid userinfo characters

Escaping rules are applied per component: a host may only percent-encode
bytes >= 0x80 (or "%25" for an IPv6 zone separator), while paths and
fragments accept any well-formed escape.

urllib.parse.urlsplit() is not used here because it never rejects input and
does not separate opaque references or raw paths.
"""

import string
from dataclasses import replace
from enum import Enum
from urllib.parse import unquote

from urlfields.contracts.url import ParsedURL

_ALNUM = frozenset(string.ascii_letters + string.digits)
_HEX = frozenset(string.hexdigits)
_DIGITS = frozenset(string.digits)
_SCHEME_TAIL = frozenset(string.digits + "+-.")

_UNRESERVED_MARKS = frozenset("-_.~")
_RESERVED = frozenset("$&+,/:;=?@")
_HOST_SUBDELIMS = frozenset("!$&'()*+,;=:[]<>\"")
_FRAGMENT_EXTRA = frozenset("!()*")
_USERINFO_CHARS = _ALNUM | frozenset("-._:~!$&'()*+,;=%@")


class URLParseError(ValueError):
    """Raised when a string cannot be decomposed as a URL.

    Attributes:
        op: Operation that failed (always "parse")
        url: The offending input (fragment excluded unless the fragment failed)
        reason: What was wrong with it
    """

    def __init__(self, op: str, url: str, reason: str) -> None:
        self.op = op
        self.url = url
        self.reason = reason
        super().__init__(f'{op} "{url}": {reason}')


class _Encoding(Enum):
    PATH = "path"
    HOST = "host"
    ZONE = "zone"
    USER_PASSWORD = "user_password"
    FRAGMENT = "fragment"


class _ComponentError(Exception):
    """Internal: component-level failure, wrapped into URLParseError by parse_url()."""


def _should_escape(c: int, mode: _Encoding) -> bool:
    """Return True if byte c must be percent-encoded in a component of this kind."""
    ch = chr(c)
    if ch in _ALNUM:
        return False

    if mode in (_Encoding.HOST, _Encoding.ZONE) and ch in _HOST_SUBDELIMS:
        return False

    if ch in _UNRESERVED_MARKS:
        return False

    if ch in _RESERVED:
        if mode is _Encoding.PATH:
            return ch == "?"
        if mode is _Encoding.USER_PASSWORD:
            return ch in "@/?:"
        if mode is _Encoding.FRAGMENT:
            return False

    if mode is _Encoding.FRAGMENT and ch in _FRAGMENT_EXTRA:
        return False

    return True


def _unescape(s: str, mode: _Encoding) -> str:
    """Validate percent escapes in s for this component kind, then decode."""
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if ch == "%":
            if i + 2 >= n or s[i + 1] not in _HEX or s[i + 2] not in _HEX:
                raise _ComponentError(f'invalid URL escape "{s[i : i + 3]}"')
            # Hosts may only escape non-ASCII bytes; "%25" introduces an IPv6 zone
            if mode is _Encoding.HOST and int(s[i + 1], 16) < 8 and s[i : i + 3] != "%25":
                raise _ComponentError(f'invalid URL escape "{s[i : i + 3]}"')
            if mode is _Encoding.ZONE:
                v = int(s[i + 1 : i + 3], 16)
                if s[i : i + 3] != "%25" and v != 0x20 and _should_escape(v, _Encoding.HOST):
                    raise _ComponentError(f'invalid URL escape "{s[i : i + 3]}"')
            i += 3
            continue

        if mode in (_Encoding.HOST, _Encoding.ZONE) and ord(ch) < 0x80 and _should_escape(ord(ch), mode):
            raise _ComponentError(f'invalid character "{ch}" in host name')
        i += 1

    return unquote(s)


def _escape(s: str, mode: _Encoding) -> str:
    """Percent-encode s using the default encoding for this component kind.

    Surrogate escapes in s (from unquote(..., errors="surrogateescape")) are
    encoded back to the raw bytes they stand for.
    """
    out: list[str] = []
    for b in s.encode("utf-8", "surrogateescape"):
        if _should_escape(b, mode):
            out.append(f"%{b:02X}")
        else:
            out.append(chr(b))
    return "".join(out)


def _split_scheme(raw: str) -> tuple[str, str]:
    """Split "scheme:rest". Returns ("", raw) when raw has no valid scheme."""
    for i, ch in enumerate(raw):
        if ch in string.ascii_letters:
            continue
        if ch in _SCHEME_TAIL:
            if i == 0:
                return "", raw
            continue
        if ch == ":":
            if i == 0:
                raise _ComponentError("missing protocol scheme")
            return raw[:i], raw[i + 1 :]
        # Anything else means this was never a scheme
        return "", raw
    return "", raw


def _valid_optional_port(colon_port: str) -> bool:
    if colon_port == "":
        return True
    if colon_port[0] != ":":
        return False
    return all(ch in _DIGITS for ch in colon_port[1:])


def _parse_host(host: str) -> str:
    if host.startswith("["):
        i = host.rfind("]")
        if i < 0:
            raise _ComponentError("missing ']' in host")
        colon_port = host[i + 1 :]
        if not _valid_optional_port(colon_port):
            raise _ComponentError(f'invalid port "{colon_port}" after host')

        zone = host[:i].find("%25")
        if zone >= 0:
            return _unescape(host[:zone], _Encoding.HOST) + _unescape(host[zone:i], _Encoding.ZONE) + _unescape(host[i:], _Encoding.HOST)
    else:
        i = host.rfind(":")
        if i != -1:
            colon_port = host[i:]
            if not _valid_optional_port(colon_port):
                raise _ComponentError(f'invalid port "{colon_port}" after host')

    return _unescape(host, _Encoding.HOST)


def _parse_authority(authority: str) -> str:
    """Validate "userinfo@host:port" and return the decoded host:port part.

    Userinfo is checked but not returned; credentials are never written to events.
    """
    i = authority.rfind("@")
    host = _parse_host(authority[i + 1 :])
    if i < 0:
        return host

    userinfo = authority[:i]
    if not all(ch in _USERINFO_CHARS for ch in userinfo):
        raise _ComponentError("net/url: invalid userinfo")
    for part in userinfo.split(":", 1):
        _unescape(part, _Encoding.USER_PASSWORD)
    return host


def split_host_port(host_port: str) -> tuple[str, str]:
    """Split a decoded "host:port" into hostname and port.

    The port is only split off when everything after the last colon is
    digits. IPv6 brackets are stripped from the hostname.

    Examples:
        >>> split_host_port("example.com:8443")
        ('example.com', '8443')
        >>> split_host_port("[::1]")
        ('::1', '')
    """
    host, port = host_port, ""
    colon = host.rfind(":")
    if colon != -1 and _valid_optional_port(host[colon:]):
        host, port = host[:colon], host[colon + 1 :]
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def _parse_reference(raw: str) -> ParsedURL:
    """Parse everything before the fragment."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise _ComponentError("net/url: invalid control character in URL")

    if raw == "*":
        return ParsedURL(path="*")

    scheme, rest = _split_scheme(raw)
    scheme = scheme.lower()
    rest, _, raw_query = rest.partition("?")

    if not rest.startswith("/"):
        if scheme:
            # Rootless reference such as "mailto:user@example.com"
            return ParsedURL(scheme=scheme, opaque=rest, raw_query=raw_query)
        if ":" in rest.partition("/")[0]:
            raise _ComponentError("first path segment in URL cannot contain colon")

    host = ""
    if (scheme or not rest.startswith("///")) and rest.startswith("//"):
        authority, slash, tail = rest[2:].partition("/")
        rest = slash + tail
        host = _parse_authority(authority)

    path = _unescape(rest, _Encoding.PATH)
    # Compare on the exact decoded bytes; path itself carries U+FFFD for invalid UTF-8
    exact = unquote(rest, errors="surrogateescape")
    raw_path = "" if _escape(exact, _Encoding.PATH) == rest else rest
    hostname, port = split_host_port(host)

    return ParsedURL(
        scheme=scheme,
        hostname=hostname,
        port=port,
        path=path,
        raw_path=raw_path,
        raw_query=raw_query,
    )


def parse_url(raw: str) -> ParsedURL:
    """Decompose a URL string into its components.

    Args:
        raw: URL or relative reference

    Returns:
        ParsedURL with every component as a string ("" when absent)

    Raises:
        URLParseError: If the string is structurally invalid

    Example:
        >>> parse_url("https://example.com:8443/a/b?x=1#frag").to_dict()
        {'scheme': 'https', 'opaque': '', 'hostname': 'example.com', 'port': '8443', 'path': '/a/b', 'raw_path': '', 'raw_query': 'x=1', 'fragment': 'frag'}
    """
    surrogate = next((ch for ch in raw if "\ud800" <= ch <= "\udfff"), None)
    if surrogate is not None:
        raise URLParseError("parse", raw, f"invalid character {surrogate!r} in URL")

    reference, _, fragment = raw.partition("#")
    try:
        parsed = _parse_reference(reference)
    except _ComponentError as e:
        raise URLParseError("parse", reference, str(e)) from e

    if not fragment:
        return parsed

    try:
        decoded = _unescape(fragment, _Encoding.FRAGMENT)
    except _ComponentError as e:
        raise URLParseError("parse", raw, str(e)) from e
    return replace(parsed, fragment=decoded)
