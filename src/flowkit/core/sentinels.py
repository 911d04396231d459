"""Absence markers shared by every flowkit namespace.

flowkit distinguishes two kinds of "no value":

* ``None`` means *missing or not applicable*: the input was invalid (a
  fractional index, an impossible length) or no branch applied.
* :data:`NOT_FOUND` means *not found* or *no default*: a lookup ran and came
  back empty (index out of range, no element matched, key absent).

The two are never coalesced. Functions that receive either one hand the same
marker back, so a caller can always tell which kind of absence occurred.
"""

import typing as tp

__all__ = ["NotFound", "NOT_FOUND", "is_not_found", "is_nullish"]


class NotFound:
    """Singleton type of :data:`NOT_FOUND`."""

    _instance: tp.ClassVar["NotFound | None"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "NotFound":
        return self

    def __deepcopy__(self, memo: dict) -> "NotFound":
        return self

    def __reduce__(self) -> str:
        # Unpickles to the module-level singleton
        return "NOT_FOUND"


NOT_FOUND = NotFound()


def is_not_found(value: tp.Any) -> bool:
    """Check if the value is the not-found marker."""
    return value is NOT_FOUND


def is_nullish(value: tp.Any) -> bool:
    """Check if the value is either absence marker."""
    return value is None or value is NOT_FOUND
