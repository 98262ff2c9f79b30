"""Decomposed URL value type.

ParsedURL is what the URL parser produces and what the transform writes
into events. Every component is a string; absent components are "".

Usage:
    from urlfields.core.urlparse import parse_url

    parsed = parse_url("https://example.com:8443/a/b?x=1#frag")
    parsed.hostname  # "example.com"
    parsed.port      # "8443"
    parsed.to_dict() # eight-key dict, ready for Event.put_value()
"""

from dataclasses import asdict, dataclass
from typing import Final

URL_COMPONENT_KEYS: Final[tuple[str, ...]] = (
    "scheme",
    "opaque",
    "hostname",
    "port",
    "path",
    "raw_path",
    "raw_query",
    "fragment",
)


@dataclass(frozen=True)
class ParsedURL:
    """URL split into its components.

    Attributes:
        scheme: Lowercased scheme without ":" ("" for relative references)
        opaque: Rootless remainder after the scheme (e.g. "user@host" in "mailto:user@host")
        hostname: Host without port, IPv6 brackets stripped
        port: Port digits, "" when absent
        path: Percent-decoded path
        raw_path: Original path text, "" when it equals the default encoding of path
        raw_query: Query string as written, without "?"
        fragment: Percent-decoded fragment, without "#"
    """

    scheme: str = ""
    opaque: str = ""
    hostname: str = ""
    port: str = ""
    path: str = ""
    raw_path: str = ""
    raw_query: str = ""
    fragment: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
