# src/urlfields/plugins/base.py
"""Base class for transform implementations.

Transforms MUST subclass BaseTransform so PluginManager can discover them
and so hosts get a uniform entry point:

    transform = MyTransform(config)       # raises ConfigurationError
    event, error = transform.apply(event) # raw (event, error) contract
    result = transform.process(event)     # same, wrapped in TransformResult
    transform.close()

Lifecycle: __init__ validates config once; apply()/process() run once per
event and may be called from several threads on distinct events; close()
releases resources (most transforms hold none).
"""

from abc import ABC, abstractmethod
from typing import Any

from urlfields.contracts.errors import FieldError
from urlfields.contracts.event import Event
from urlfields.contracts.results import TransformResult


class BaseTransform(ABC):
    """Base class for all event transforms.

    Subclasses set `name` and implement apply().
    """

    name: str
    plugin_version: str = "0.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        self.config = config

    @abstractmethod
    def apply(self, event: Event) -> tuple[Event, FieldError | None]:
        """Apply this transform to one event.

        Returns:
            The (possibly mutated) event and the error that stopped
            processing, or None.
        """
        ...

    def process(self, event: Event) -> TransformResult:
        """Apply this transform and wrap the outcome in a TransformResult."""
        event, error = self.apply(event)
        if error is not None:
            return TransformResult.failure(event, error)
        return TransformResult.success(event, success_reason={"action": self.name})

    def close(self) -> None:  # noqa: B027
        """Release resources. Default: nothing to release."""
        pass
