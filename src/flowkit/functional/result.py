"""Helpers for values that may be ``None`` or ``NOT_FOUND``.

Each helper touches at most one absence marker on purpose: ``none_to``
replaces ``None`` but leaves ``NOT_FOUND`` alone, ``not_found_to`` does the
reverse. Use :func:`flowkit.functional.logic.nullish_to` to replace both.
"""

import typing as tp

from flowkit.core.sentinels import NOT_FOUND, is_nullish
from flowkit.core.types import T, U
from flowkit.functional.pipe import safe
from flowkit.logger.logger import get_logger

__all__ = [
    "catch_as_none",
    "is_none",
    "is_not_found",
    "map",
    "none_to",
    "not_found_to",
    "to_none_if",
    "to_not_found_if",
]

logger = get_logger(__name__)


def catch_as_none(transform: tp.Callable[[T], U]) -> tp.Callable[[tp.Any], tp.Any]:
    """Like :func:`map`, but an exception raised by ``transform`` becomes ``None``.

    Example:
        >>> import math
        >>> log = catch_as_none(lambda name: getattr(math, name)(1))
        >>> log("log"), log("no_such_function")
        (0.0, None)
    """

    def wrapped(value: tp.Any) -> tp.Any:
        if is_nullish(value):
            return value
        try:
            return transform(value)
        except Exception as e:
            logger.debug(f"catch_as_none swallowed {type(e).__name__}: {e}")
            return None

    return wrapped


def is_none(value: tp.Any) -> bool:
    return value is None


def is_not_found(value: tp.Any) -> bool:
    return value is NOT_FOUND


def map(transform: tp.Callable[[T], U]) -> tp.Callable[[tp.Any], tp.Any]:
    """Apply ``transform`` unless the value is an absence marker."""
    return safe(transform)


def none_to(new_value: U) -> tp.Callable[[tp.Any], tp.Any]:
    return lambda value: new_value if value is None else value


def not_found_to(new_value: U) -> tp.Callable[[tp.Any], tp.Any]:
    return lambda value: new_value if value is NOT_FOUND else value


def to_none_if(condition: tp.Callable[[T], bool]) -> tp.Callable[[tp.Any], tp.Any]:
    """Turn values matching ``condition`` into ``None``; markers pass through."""

    def wrapped(value: tp.Any) -> tp.Any:
        if is_nullish(value):
            return value
        return None if condition(value) else value

    return wrapped


def to_not_found_if(
    condition: tp.Callable[[T], bool],
) -> tp.Callable[[tp.Any], tp.Any]:
    """Turn values matching ``condition`` into ``NOT_FOUND``; markers pass through."""

    def wrapped(value: tp.Any) -> tp.Any:
        if is_nullish(value):
            return value
        return NOT_FOUND if condition(value) else value

    return wrapped
