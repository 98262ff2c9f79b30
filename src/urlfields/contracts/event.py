"""Event container with dotted-path field access.

An Event wraps a nested dict. Paths address nested keys with dots:
"url.original" is fields["url"]["original"].

Ownership: an event belongs to exactly one transform invocation at a time.
Nothing here locks; callers must not share an event across threads while
a transform is running on it.
"""

import copy
from collections.abc import Mapping
from typing import Any

from urlfields.contracts.errors import KeyNotFoundError, PathTypeError, WriteError
from urlfields.contracts.sentinels import MISSING


class Event:
    """One structured record flowing through a pipeline.

    Usage:
        event = Event({"request": "https://example.com/"})
        event.get_value("request")
        event.put_value("url.parsed", {...})
        snapshot = event.clone()
    """

    __slots__ = ("fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self.fields: dict[str, Any] = dict(fields) if fields is not None else {}

    def __repr__(self) -> str:
        return f"Event({self.fields!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.fields == other.fields

    __hash__ = None  # type: ignore[assignment]

    def _find(self, path: str, *, create: bool) -> tuple[dict[str, Any], str]:
        """Resolve path to the mapping that holds its last key.

        At every level a key equal to the whole remaining path wins over
        splitting it, so {"url.original": ...} is addressable as "url.original".

        Raises:
            KeyNotFoundError: An intermediate segment is absent and create is False.
            PathTypeError: An intermediate segment holds a non-mapping value.
        """
        data = self.fields
        key = path
        walked: list[str] = []
        while True:
            if key in data:
                return data, key
            head, sep, rest = key.partition(".")
            if not sep:
                return data, key

            walked.append(head)
            child = data.get(head, MISSING)
            if child is MISSING:
                if not create:
                    raise KeyNotFoundError(path)
                child = {}
                data[head] = child
            elif not isinstance(child, dict):
                raise PathTypeError(path, ".".join(walked), child)
            data = child
            key = rest

    def lookup(self, path: str) -> Any:
        """Return the value at a dotted path, or MISSING if it does not resolve.

        Examples:
            >>> Event({"user": {"name": "Alice"}}).lookup("user.name")
            'Alice'
            >>> Event({"user": {"name": "Alice"}}).lookup("user.email") is MISSING
            True
        """
        try:
            return self.get_value(path)
        except (KeyNotFoundError, PathTypeError):
            return MISSING

    def get_value(self, path: str) -> Any:
        """Return the value at a dotted path.

        Raises:
            KeyNotFoundError: If any segment of the path is absent.
            PathTypeError: If the path runs through a non-mapping value.
        """
        data, key = self._find(path, create=False)
        if key not in data:
            raise KeyNotFoundError(path)
        return data[key]

    def has_field(self, path: str) -> bool:
        return self.lookup(path) is not MISSING

    def put_value(self, path: str, value: Any) -> Any:
        """Write a value at a dotted path, creating intermediate mappings.

        Overwrites whatever the final segment held.

        Returns:
            The previous value at path, or MISSING if there was none.

        Raises:
            WriteError: If an intermediate segment holds a non-mapping value.
        """
        try:
            data, key = self._find(path, create=True)
        except PathTypeError as e:
            raise WriteError(path, f"could not put value: {path}: {e}") from e

        old = data.get(key, MISSING)
        data[key] = value
        return old

    def clone(self) -> "Event":
        """Return an independent deep copy of this event."""
        return Event(copy.deepcopy(self.fields))

    def to_dict(self) -> dict[str, Any]:
        return self.fields
