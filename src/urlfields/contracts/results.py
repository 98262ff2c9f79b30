"""Operation outcomes and results.

These types answer: "What did a transform invocation produce?"

IMPORTANT:
- TransformResult.status uses Literal["success", "error"], NOT an enum
- An error result still carries an event: strict-mode transforms return
  the rolled-back event annotated with error.message
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from urlfields.contracts.errors import FieldError, FieldErrorReason, WriteError

if TYPE_CHECKING:
    from urlfields.contracts.event import Event


@dataclass(frozen=True)
class TransformResult:
    """Result of one transform invocation.

    Use the factory methods to create instances.
    """

    status: Literal["success", "error"]
    event: Event
    error: FieldError | None = None
    reason: FieldErrorReason | None = None
    success_reason: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.status == "error" and self.error is None:
            raise ValueError("TransformResult with status='error' MUST carry the originating error.")

    @property
    def succeeded(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, event: Event, *, success_reason: dict[str, Any] | None = None) -> TransformResult:
        """Create successful result.

        Example:
            return TransformResult.success(event, success_reason={"action": "parsed"})
        """
        return cls(status="success", event=event, success_reason=success_reason)

    @classmethod
    def failure(cls, event: Event, error: FieldError) -> TransformResult:
        """Create error result with a structured reason built from the error."""
        reason: FieldErrorReason = {
            "reason": error.reason,
            "field": error.field,
            "message": str(error),
        }
        if isinstance(error, WriteError):
            reason["target"] = error.target
        return cls(status="error", event=event, error=error, reason=reason)
