"""Runtime type guards usable as predicates."""

import typing as tp

from flowkit.core.sentinels import NOT_FOUND, is_nullish

__all__ = [
    "is_array",
    "is_boolean",
    "is_function",
    "is_none",
    "is_not_found",
    "is_not_nullish",
    "is_nullish",
    "is_number",
    "is_pojo",
    "is_string",
]


def is_array(x: tp.Any) -> bool:
    return isinstance(x, list)


def is_boolean(x: tp.Any) -> bool:
    return isinstance(x, bool)


def is_function(x: tp.Any) -> bool:
    return callable(x)


def is_none(x: tp.Any) -> bool:
    return x is None


def is_not_found(x: tp.Any) -> bool:
    return x is NOT_FOUND


def is_not_nullish(x: tp.Any) -> bool:
    return not is_nullish(x)


def is_number(x: tp.Any) -> bool:
    """Check for ``int`` or ``float``; ``bool`` is not a number here."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_pojo(x: tp.Any) -> bool:
    """Check for a plain record: exactly ``dict``, not a subclass."""
    return type(x) is dict


def is_string(x: tp.Any) -> bool:
    return isinstance(x, str)

