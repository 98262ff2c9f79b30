"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE: it imports nothing from urlfields.core or
urlfields.plugins.

Import patterns:
    from urlfields.contracts import Event, ParsedURL, TransformResult
"""

from urlfields.contracts.errors import (
    ConfigurationError,
    FieldError,
    FieldErrorReason,
    KeyNotFoundError,
    MissingFieldError,
    TypeMismatchError,
    URLFieldsError,
    URLSyntaxError,
    WriteError,
)
from urlfields.contracts.event import Event
from urlfields.contracts.results import TransformResult
from urlfields.contracts.sentinels import MISSING, MissingSentinel
from urlfields.contracts.url import URL_COMPONENT_KEYS, ParsedURL

__all__ = [
    "MISSING",
    "URL_COMPONENT_KEYS",
    "ConfigurationError",
    "Event",
    "FieldError",
    "FieldErrorReason",
    "KeyNotFoundError",
    "MissingFieldError",
    "MissingSentinel",
    "ParsedURL",
    "TransformResult",
    "TypeMismatchError",
    "URLFieldsError",
    "URLSyntaxError",
    "WriteError",
]
