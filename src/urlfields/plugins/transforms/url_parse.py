"""URLParse transform plugin.

Reads URL strings from configured event fields, decomposes them and writes
the components back as a mapping:

    {"request": "https://example.com:8443/a/b?x=1#frag"}
    ->
    {"request": {"scheme": "https", "opaque": "", "hostname": "example.com",
                 "port": "8443", "path": "/a/b", "raw_path": "",
                 "raw_query": "x=1", "fragment": "frag"}}

Failure policy (per invocation, across all configured fields):
- fail_on_error=True (default): all-or-nothing. The first failing field
  restores the event to its state on entry, sets error.message and stops.
- fail_on_error=False: best-effort. Failing fields are logged and skipped,
  successful fields stay written.

ignore_missing=True turns an absent source field into a silent no-op in
both modes.
"""

from typing import Any, Final

from pydantic import Field, StrictBool, StrictStr, field_validator, model_validator

from urlfields.contracts.errors import (
    FieldError,
    KeyNotFoundError,
    MissingFieldError,
    PathTypeError,
    TypeMismatchError,
    URLSyntaxError,
    WriteError,
)
from urlfields.contracts.event import Event
from urlfields.core.logging import get_logger
from urlfields.core.urlparse import URLParseError, parse_url
from urlfields.plugins.base import BaseTransform
from urlfields.plugins.config_base import PluginConfig

logger = get_logger(__name__)

ERROR_FIELD: Final[str] = "error.message"
ERROR_PREFIX: Final[str] = "failed to parse fields in urlparse processor"


class FieldMapping(PluginConfig):
    """One source -> destination pair. `to` defaults to `from`."""

    source: StrictStr = Field(alias="from", min_length=1)
    target: StrictStr = Field(default="", alias="to")

    @model_validator(mode="before")
    @classmethod
    def _default_target(cls, data: Any) -> Any:
        # Only an absent, null or empty `to` defaults; other values go to validation
        if isinstance(data, dict) and "from" in data and data.get("to") in (None, ""):
            data = {**data, "to": data["from"]}
        return data

    @field_validator("source", "target")
    @classmethod
    def _validate_path_not_blank(cls, v: str) -> str:
        """Validate that a field path is not whitespace-only."""
        if not v.strip():
            raise ValueError("field path cannot be blank")
        return v

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


class URLParseConfig(PluginConfig):
    """Execution plan for the URLParse transform.

    Frozen after validation; one instance is shared by every invocation.
    """

    fields: tuple[FieldMapping, ...] = Field(min_length=1)
    ignore_missing: StrictBool = False
    fail_on_error: StrictBool = True


def _parse_field(mapping: FieldMapping, event: Event, ignore_missing: bool) -> None:
    """Parse one field into the event, or do nothing if it is missing and ignored.

    Raises:
        FieldError: One of its subclasses, describing why this field failed.
    """
    try:
        value = event.get_value(mapping.source)
    except KeyNotFoundError:
        if ignore_missing:
            return
        raise MissingFieldError(mapping.source) from None
    except PathTypeError as e:
        raise TypeMismatchError(mapping.source, e.value, detail=str(e)) from e

    if not isinstance(value, str):
        raise TypeMismatchError(mapping.source, value)

    try:
        parsed = parse_url(value)
    except URLParseError as e:
        raise URLSyntaxError(mapping.source, value, e) from e

    try:
        event.put_value(mapping.target, parsed.to_dict())
    except WriteError as e:
        raise WriteError(e.target, str(e), field=mapping.source) from e


def apply(plan: URLParseConfig, event: Event) -> tuple[Event, FieldError | None]:
    """Apply every field mapping in the plan to one event, in configured order.

    Args:
        plan: Validated configuration (never mutated)
        event: Event to rewrite in place

    Returns:
        (event, None) when every field was parsed or tolerated.
        (event, error) in strict mode when a field failed; the event is
        restored to its state on entry and carries error.message.
    """
    backup: dict[str, Any] | None = None
    if plan.fail_on_error:
        backup = event.clone().fields

    for mapping in plan.fields:
        try:
            _parse_field(mapping, event, plan.ignore_missing)
        except FieldError as err:
            message = f"{ERROR_PREFIX}: {err}"
            logger.debug(
                message,
                field=mapping.source,
                target=mapping.target,
                reason=err.reason,
                error=str(err),
            )
            if backup is None:
                continue

            event.fields = backup
            logger.debug("rolled back event after field failure", field=mapping.source, target=mapping.target)
            try:
                event.put_value(ERROR_FIELD, message)
            except WriteError as annotate_err:
                logger.warning(
                    "could not annotate event with error message",
                    error_field=ERROR_FIELD,
                    error=str(annotate_err),
                )
            return event, err

    return event, None


class URLParse(BaseTransform):
    """Decompose URL strings held in event fields.

    Config options:
        fields: Required, non-empty list of {from: path, to: path}
            - to defaults to from (the URL is replaced by its components)
        ignore_missing: Skip absent source fields silently (default: False)
        fail_on_error: Roll back the whole event on any field failure (default: True)
    """

    name = "urlparse"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        self._plan = URLParseConfig.from_dict(config)

    @property
    def plan(self) -> URLParseConfig:
        return self._plan

    def apply(self, event: Event) -> tuple[Event, FieldError | None]:
        return apply(self._plan, event)

    def __str__(self) -> str:
        return f"{self.name}=[{', '.join(str(m) for m in self._plan.fields)}]"
