"""Sentinel values for event field lookups.

Distinguishes "path does not exist" from "path holds None":

    from urlfields.contracts.sentinels import MISSING

    value = event.lookup("url.original")
    if value is MISSING:
        # Field was not present in the event
        ...
    elif value is None:
        # Field was present but explicitly null
        ...
"""

from typing import Final


class MissingSentinel:
    """Sentinel class to distinguish missing fields from None values.

    This is a singleton - use the MISSING instance, not the class directly.
    Comparison should always use `is` identity, never equality.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: Final[MissingSentinel] = MissingSentinel()
"""Singleton sentinel indicating a field was not found.

Use identity comparison: `if value is MISSING:`
"""
