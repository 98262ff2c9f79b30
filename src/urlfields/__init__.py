"""
urlfields: decompose URL strings held in event fields.

A transform for structured-event pipelines that replaces (or copies) URL
fields with their components, with all-or-nothing or best-effort failure
handling across the configured fields.
"""

from urlfields.contracts import ConfigurationError, Event, ParsedURL, TransformResult
from urlfields.core.urlparse import URLParseError, parse_url
from urlfields.plugins.transforms.url_parse import URLParse, URLParseConfig, apply

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Event",
    "ParsedURL",
    "TransformResult",
    "URLParse",
    "URLParseConfig",
    "URLParseError",
    "apply",
    "parse_url",
]
