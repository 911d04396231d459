"""Predicate combinators and generic control-flow helpers.

Predicates are unary functions returning ``bool``. The combinators here build
new predicates (``both``, ``either``, ``all_pass``, ...) or choose between
transforms based on one (``if_else``, ``when``, ``unless``, ``branch``).

Examples:
    >>> from flowkit.functional import logic as L, number as N
    >>> small_positive = L.both(N.is_positive, N.is_lt(10))
    >>> small_positive(3), small_positive(13)
    (True, False)
    >>> discount = L.branch(
    ...     (N.is_gt(100), N.multiply(0.9)),
    ...     (N.is_gt(50), N.subtract(5)),
    ... )
    >>> discount(500), discount(100), discount(10)
    (450.0, 95, None)
"""

import math
import typing as tp

from flowkit.core.sentinels import is_nullish
from flowkit.core.types import Predicate, T, U

__all__ = [
    "all_fail",
    "all_pass",
    "always",
    "always_false",
    "always_true",
    "any_fail",
    "any_pass",
    "both",
    "branch",
    "either",
    "equals",
    "identity",
    "if_else",
    "is_included_in",
    "neither",
    "not_",
    "nullish_to",
    "strict_equals",
    "unless",
    "when",
]


def _is_nan(x: tp.Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def strict_equals(a: tp.Any, b: tp.Any) -> bool:
    """Equality that never matches a bool against a number.

    ``0 == False`` holds in Python; here it does not. Two NaNs are equal, so
    membership tests such as ``array.includes(math.nan)`` can find NaN.
    """
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if _is_nan(a) and _is_nan(b):
        return True
    return bool(a == b)


def all_fail(*conditions: Predicate) -> Predicate:
    return lambda a: all(not f(a) for f in conditions)


def all_pass(*conditions: Predicate) -> Predicate:
    return lambda a: all(f(a) for f in conditions)


def always(value: U) -> tp.Callable[[tp.Any], U]:
    return lambda _: value


def always_false(_: tp.Any) -> bool:
    return False


def always_true(_: tp.Any) -> bool:
    return True


def any_fail(*conditions: Predicate) -> Predicate:
    return lambda a: any(not f(a) for f in conditions)


def any_pass(*conditions: Predicate) -> Predicate:
    return lambda a: any(f(a) for f in conditions)


def both(condition1: Predicate, condition2: Predicate) -> Predicate:
    return lambda a: bool(condition1(a) and condition2(a))


def branch(
    *cases: tuple[Predicate, tp.Callable[[tp.Any], tp.Any]],
) -> tp.Callable[[tp.Any], tp.Any]:
    """Apply the transform paired with the first condition that holds.

    Args:
        *cases: ``(condition, transform)`` pairs, tried in order.

    Returns:
        A function returning the chosen transform's result, or ``None`` when
        no condition holds.
    """

    def branched(x: tp.Any) -> tp.Any:
        for condition, transform in cases:
            if condition(x):
                return transform(x)
        return None

    return branched


def either(condition1: Predicate, condition2: Predicate) -> Predicate:
    return lambda a: bool(condition1(a) or condition2(a))


def equals(value: tp.Any) -> Predicate:
    return lambda a: strict_equals(a, value)


def identity(a: T) -> T:
    return a


def if_else(
    condition: Predicate,
    transform_if_true: tp.Callable[[T], U],
    transform_if_false: tp.Callable[[T], U],
) -> tp.Callable[[T], U]:
    return lambda a: transform_if_true(a) if condition(a) else transform_if_false(a)


def is_included_in(values: tp.Iterable[tp.Any]) -> Predicate:
    values = list(values)
    return lambda x: any(strict_equals(x, v) for v in values)


def neither(condition1: Predicate, condition2: Predicate) -> Predicate:
    return lambda a: not condition1(a) and not condition2(a)


def not_(f: tp.Callable[..., tp.Any]) -> tp.Callable[..., bool]:
    """Negate a function of any arity."""
    return lambda *args, **kwargs: not f(*args, **kwargs)


def nullish_to(value: U) -> tp.Callable[[tp.Any], tp.Any]:
    """Replace ``None`` and ``NOT_FOUND`` with ``value``; keep anything else."""
    return lambda a: value if is_nullish(a) else a


def unless(condition: Predicate, f: tp.Callable[[T], T]) -> tp.Callable[[T], T]:
    return lambda a: a if condition(a) else f(a)


def when(condition: Predicate, f: tp.Callable[[T], T]) -> tp.Callable[[T], T]:
    return lambda a: f(a) if condition(a) else a
