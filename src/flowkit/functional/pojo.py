"""Curried operations over plain records (``dict``).

Records are never mutated; every transform returns a new ``dict`` with the
original key order preserved.

Lookups distinguish a missing key from a stored ``None``: a missing key reads
as ``NOT_FOUND`` unless a default is supplied.

    >>> from flowkit.functional import pojo as P
    >>> P.get_or("y")({"x": 5}), P.get_or("y", 10)({"x": 5})
    (NOT_FOUND, 10)
"""

import typing as tp

from flowkit.core.sentinels import NOT_FOUND
from flowkit.core.types import K, Predicate, T, U
from flowkit.functional.logic import strict_equals

__all__ = [
    "all_props_satisfy",
    "any_prop_satisfies",
    "entries",
    "filter",
    "filter_with_key",
    "from_spec",
    "get_or",
    "has_key",
    "is_empty",
    "keys",
    "map",
    "map_with_key",
    "merge",
    "merge_into",
    "no_prop_satisfies",
    "pick",
    "prop_equals",
    "prop_satisfies",
    "regroup",
    "remove",
    "set",
    "values",
]

Record = tp.Mapping[K, T]


def all_props_satisfy(condition: Predicate) -> tp.Callable[[Record], bool]:
    return lambda obj: all(condition(v) for v in obj.values())


def any_prop_satisfies(condition: Predicate) -> tp.Callable[[Record], bool]:
    return lambda obj: any(condition(v) for v in obj.values())


def no_prop_satisfies(condition: Predicate) -> tp.Callable[[Record], bool]:
    return lambda obj: not any(condition(v) for v in obj.values())


def entries(obj: Record) -> list[tuple]:
    return list(obj.items())


def keys(obj: Record) -> list:
    return list(obj.keys())


def values(obj: Record) -> list:
    return list(obj.values())


def is_empty(obj: Record) -> bool:
    return len(obj) == 0


def filter(condition: Predicate) -> tp.Callable[[Record], dict]:
    """Keep the entries whose value satisfies ``condition``."""
    return lambda obj: {k: v for k, v in obj.items() if condition(v)}


def filter_with_key(condition: tp.Callable[[K, T], bool]) -> tp.Callable[[Record], dict]:
    """Keep the entries for which ``condition(key, value)`` holds."""
    return lambda obj: {k: v for k, v in obj.items() if condition(k, v)}


def map(transform: tp.Callable[[T], U]) -> tp.Callable[[Record], dict]:
    """Transform every value, keeping the keys."""
    return lambda obj: {k: transform(v) for k, v in obj.items()}


def map_with_key(transform: tp.Callable[[T, K], U]) -> tp.Callable[[Record], dict]:
    """Transform every value with ``transform(value, key)``.

    Example:
        >>> weights = {"x": 10, "y": 20}
        >>> map_with_key(lambda v, k: v * weights[k])({"x": 3, "y": 4})
        {'x': 30, 'y': 80}
    """
    return lambda obj: {k: transform(v, k) for k, v in obj.items()}


def from_spec(spec: tp.Mapping[K, tp.Callable[[T], tp.Any]]) -> tp.Callable[[T], dict]:
    """Build a record by applying each function in ``spec`` to one input.

    Example:
        >>> from_spec({"lo": min, "hi": max})([3, 4, 5, 6])
        {'lo': 3, 'hi': 6}
    """
    return lambda x: {k: f(x) for k, f in spec.items()}


def get_or(key: K, default: tp.Any = NOT_FOUND) -> tp.Callable[[Record], tp.Any]:
    """Value at ``key``, or ``default`` when the key is absent."""
    return lambda obj: obj[key] if key in obj else default


def has_key(key: K) -> tp.Callable[[Record], bool]:
    return lambda obj: key in obj


def merge(other: Record) -> tp.Callable[[Record], dict]:
    """Overlay ``other`` onto the record; ``other`` wins on shared keys."""
    return lambda obj: {**obj, **other}


def merge_into(other: Record) -> tp.Callable[[Record], dict]:
    """Overlay the record onto ``other``; the record wins on shared keys."""
    return lambda obj: {**other, **obj}


def pick(wanted: tp.Iterable[K]) -> tp.Callable[[Record], dict]:
    """Sub-record with the keys in ``wanted`` that are present."""
    wanted = list(wanted)
    return lambda obj: {k: obj[k] for k in wanted if k in obj}


def prop_equals(key: K, value: tp.Any) -> tp.Callable[[Record], bool]:
    """Check the value at ``key``; an absent key never matches a present value."""
    return lambda obj: strict_equals(obj.get(key, NOT_FOUND), value)


def prop_satisfies(key: K, condition: Predicate) -> tp.Callable[[Record], bool]:
    """Apply ``condition`` to the value at ``key`` (``NOT_FOUND`` if absent)."""
    return lambda obj: bool(condition(obj.get(key, NOT_FOUND)))


def regroup(obj: tp.Mapping[K, tp.Mapping[tp.Any, T]]) -> dict:
    """Swap the two key levels of a nested record.

    Example:
        >>> regroup({"x": {"a": 1, "b": 2}, "y": {"a": 3, "b": 4}})
        {'a': {'x': 1, 'y': 3}, 'b': {'x': 2, 'y': 4}}
    """
    out: dict = {}
    for outer, inner in obj.items():
        for k, v in inner.items():
            out.setdefault(k, {})[outer] = v
    return out


def remove(to_remove: tp.Any) -> tp.Callable[[Record], dict]:
    """Copy without a key, or without every key in a ``list`` of keys."""
    dropped = to_remove if isinstance(to_remove, list) else [to_remove]
    return lambda obj: {k: v for k, v in obj.items() if k not in dropped}


def set(key: K, value: tp.Any, create_if_not_found: bool = True) -> tp.Callable[[Record], dict]:
    """Copy with ``key`` set to ``value``.

    With ``create_if_not_found=False`` an absent key is not added and the copy
    is returned unchanged.
    """

    def setter(obj: Record) -> dict:
        out = dict(obj)
        if key in out or create_if_not_found:
            out[key] = value
        return out

    return setter
