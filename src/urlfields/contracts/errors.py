"""Error contracts for the URL field transform.

Two families live here:

- ConfigurationError: raised while building a transform from raw config.
  Fatal, never recovered at runtime.
- FieldError subclasses: raised while applying one field mapping to one
  event. These are subject to the transform's fail_on_error policy and are
  never retried (the same input always produces the same error).

KeyNotFoundError is the lookup miss raised by Event.get_value(). The
transform classifies it as MissingFieldError. PathTypeError (the path walks
through a scalar) is classified as TypeMismatchError, never as missing.
"""

from typing import Any, NotRequired, TypedDict


class URLFieldsError(Exception):
    """Base class for all urlfields errors."""


class ConfigurationError(URLFieldsError):
    """Raised when transform configuration is invalid."""


class KeyNotFoundError(URLFieldsError, KeyError):
    """Raised when a dotted path does not resolve to a value in an event."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"key not found: {path}")

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the message
        return str(self.args[0])


class PathTypeError(URLFieldsError, TypeError):
    """Raised when a dotted path walks through a value that is not a mapping.

    Attributes:
        path: Full path being resolved
        walked: Prefix of path that resolved to the blocking value
        value: The blocking value
        value_type: Type name of the blocking value
    """

    def __init__(self, path: str, walked: str, value: Any) -> None:
        self.path = path
        self.walked = walked
        self.value = value
        self.value_type = type(value).__name__
        super().__init__(f"expected map at {walked} but type is {self.value_type}")


# =============================================================================
# Per-field errors
# =============================================================================


class FieldError(URLFieldsError):
    """A single field mapping could not be applied.

    Attributes:
        field: Source path of the mapping that failed
    """

    reason = "field_error"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(FieldError):
    """Source field is absent from the event."""

    reason = "missing_field"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"could not fetch value for key: {field}, Error: key not found")


class TypeMismatchError(FieldError):
    """Source field does not hold a string, or its path runs through a non-mapping."""

    reason = "type_mismatch"

    def __init__(self, field: str, value: Any, *, detail: str | None = None) -> None:
        self.value_type = type(value).__name__
        if detail is None:
            message = f"invalid type for `from`, expecting a string received {self.value_type}"
        else:
            message = f"could not fetch value for key: {field}, Error: {detail}"
        super().__init__(field, message)


class URLSyntaxError(FieldError):
    """Source string was rejected by the URL parser."""

    reason = "url_syntax"

    def __init__(self, field: str, url: str, cause: Exception) -> None:
        self.url = url
        super().__init__(field, f"error trying to URL-parse {url}: {cause}")


class WriteError(FieldError):
    """Destination path cannot hold a value.

    Raised by Event.put_value() when a path segment already holds a
    non-mapping value. The transform re-raises with the source field set.
    """

    reason = "write_failed"

    def __init__(self, target: str, message: str, field: str = "") -> None:
        self.target = target
        super().__init__(field, message)


class FieldErrorReason(TypedDict):
    """Structured error payload for a failed URL parse invocation.

    Carried on TransformResult.reason so callers can route on `reason`
    without string matching.
    """

    reason: str
    field: str
    message: str
    target: NotRequired[str]
