"""Curried arithmetic and numeric predicates.

Every binary operation is written data-last: the configured operand comes
first and the returned function receives the value being transformed, so
``subtract(5)(2) == -3`` reads as "subtract 5 from 2".

Division and remainder by zero follow IEEE-754 and produce ``inf``, ``-inf`` or
``nan`` rather than raising ``ZeroDivisionError``, which keeps long chains of
arithmetic free of ``try`` blocks:

    >>> from flowkit.functional import number as N
    >>> N.divide(0)(1), N.modulo(0)(7)
    (inf, nan)

Two remainders are offered because they disagree on negative operands:

    - :func:`modulo` truncates, so the result has the sign of the dividend.
    - :func:`math_modulo` floors, so the result has the sign of the divisor.
"""

import math
import typing as tp

from flowkit.core.config import settings
from flowkit.core.indexing import as_integer, is_integer

__all__ = [
    "add",
    "clamp",
    "divide",
    "divide_into",
    "is_between",
    "is_close_to",
    "is_divisible_by",
    "is_even",
    "is_gt",
    "is_gte",
    "is_lt",
    "is_lte",
    "is_negative",
    "is_non_negative",
    "is_odd",
    "is_positive",
    "math_modulo",
    "modulo",
    "multiply",
    "nth_root",
    "pow",
    "round",
    "subtract",
    "subtract_from",
]

Number = tp.Union[int, float]


def _divide(x: Number, y: Number) -> Number:
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _power(x: Number, exponent: Number) -> Number:
    try:
        result = x**exponent
    except (ZeroDivisionError, OverflowError):
        # 0 to a negative power, or a float result past the largest double
        odd = is_integer(exponent) and as_integer(exponent) % 2 == 1
        return math.copysign(math.inf, x) if odd else math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def _truncated_remainder(x: Number, y: Number) -> Number:
    if y == 0 or math.isinf(x):
        return math.nan
    if isinstance(x, int) and isinstance(y, int):
        r = abs(x) % abs(y)
        return r if x >= 0 else -r
    return math.fmod(x, y)


def add(y: Number) -> tp.Callable[[Number], Number]:
    return lambda x: x + y


def clamp(minimum: Number, maximum: Number) -> tp.Callable[[Number], Number]:
    """Limit a value to ``[minimum, maximum]``."""
    return lambda x: max(minimum, min(x, maximum))


def divide(y: Number) -> tp.Callable[[Number], Number]:
    """Divide the value by ``y``."""
    return lambda x: _divide(x, y)


def divide_into(y: Number) -> tp.Callable[[Number], Number]:
    """Divide ``y`` by the value."""
    return lambda x: _divide(y, x)


def is_between(minimum: Number, maximum: Number) -> tp.Callable[[Number], bool]:
    """Inclusive range check."""
    return lambda x: minimum <= x <= maximum


def is_close_to(
    y: Number, tolerance: float | None = None
) -> tp.Callable[[Number], bool]:
    """Check if a value lies within ``tolerance`` of ``y``.

    Args:
        y: Target value.
        tolerance: Maximum absolute difference. Defaults to
            ``settings.CLOSE_TOLERANCE`` (1e-15 unless configured).
    """
    tol = settings.CLOSE_TOLERANCE if tolerance is None else tolerance
    return lambda x: abs(y - x) <= tol


def is_divisible_by(y: Number, tolerance: float = 0) -> tp.Callable[[Number], bool]:
    """Check if a value is a multiple of ``y``.

    With a non-zero ``tolerance`` the value only has to be that close to the
    nearest multiple, which is useful for floats.
    """
    if tolerance == 0:
        return lambda x: _truncated_remainder(x, y) == 0

    def divisible(x: Number) -> bool:
        quotient = _divide(x, y)
        if not math.isfinite(quotient):
            return False
        closest_multiple = math.floor(quotient + 0.5) * y
        return abs(x - closest_multiple) <= tolerance

    return divisible


def is_even(x: Number) -> bool:
    return _truncated_remainder(x, 2) == 0


def is_gt(y: Number) -> tp.Callable[[Number], bool]:
    return lambda x: x > y


def is_gte(y: Number) -> tp.Callable[[Number], bool]:
    return lambda x: x >= y


def is_lt(y: Number) -> tp.Callable[[Number], bool]:
    return lambda x: x < y


def is_lte(y: Number) -> tp.Callable[[Number], bool]:
    return lambda x: x <= y


def is_negative(x: Number) -> bool:
    return x < 0


def is_non_negative(x: Number) -> bool:
    return x >= 0


def is_odd(x: Number) -> bool:
    return abs(_truncated_remainder(x, 2)) == 1


def is_positive(x: Number) -> bool:
    return x > 0


def math_modulo(y: Number) -> tp.Callable[[Number], Number]:
    """Floored remainder: the result takes the sign of ``y``."""

    def remainder(x: Number) -> Number:
        if y == 0 or math.isinf(x):
            return math.nan
        return x % y

    return remainder


def modulo(y: Number) -> tp.Callable[[Number], Number]:
    """Truncated remainder: the result takes the sign of the value."""
    return lambda x: _truncated_remainder(x, y)


def multiply(y: Number) -> tp.Callable[[Number], Number]:
    return lambda x: x * y


def nth_root(root: Number) -> tp.Callable[[Number], float]:
    """Real ``root``-th root, keeping the sign for odd roots of negatives."""
    exponent = _divide(1, root)
    return lambda x: math.copysign(_power(abs(x), exponent), x) if x != 0 else 0.0


def pow(exponent: Number) -> tp.Callable[[Number], Number]:
    """Raise the value to ``exponent``.

    A negative base with a fractional exponent has no real result and
    yields ``nan``. Zero to a negative power and results too large for a
    float give ``inf`` (``-inf`` for a negative base and odd exponent).
    """
    return lambda x: _power(x, exponent)


def round(places: int = 0) -> tp.Callable[[Number], Number]:
    """Round half up to ``places`` decimal places.

    Negative ``places`` round to tens, hundreds, and so on. NaN and
    infinities are returned unchanged.

    Example:
        >>> round(2)(12345.6789), round()(12345.6789), round(-2)(12345.6789)
        (12345.68, 12346, 12300)
    """
    if places > 0:
        scale = 10**places

        def scaled(x: Number) -> Number:
            return math.floor(x * scale + 0.5) / scale if math.isfinite(x) else x

        return scaled

    factor = 10**-places
    return lambda x: math.floor(x / factor + 0.5) * factor if math.isfinite(x) else x


def subtract(y: Number) -> tp.Callable[[Number], Number]:
    return lambda x: x - y


def subtract_from(y: Number) -> tp.Callable[[Number], Number]:
    return lambda x: y - x
