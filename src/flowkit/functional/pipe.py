"""Composition primitives: ``pipe``, ``flow`` and the safe wrappers.

``pipe`` pushes a value through a chain of unary functions right away, while
``flow`` builds the chain as a new function that waits for its input. Both
evaluate strictly left to right and let any exception raised along the way
reach the caller untouched.

Examples:
    >>> import math
    >>> from flowkit import pipe, flow
    >>> pipe(3, lambda x: x * 2, lambda x: x + 4, math.log10)
    1.0
    >>> to_log = flow(lambda x, y: x * y, lambda x: x + 4, math.log10)
    >>> to_log(2, 3)
    1.0

``safe`` lifts a function over the two absence markers so that a chain stops
doing work as soon as one appears, and ``tap`` lets a side effect observe an
intermediate value without changing it.
"""

import typing as tp
from functools import reduce

from flowkit.core.sentinels import is_nullish
from flowkit.core.types import T, U
from flowkit.logger.logger import get_logger

__all__ = ["pipe", "flow", "tap", "safe", "safe_catch"]

logger = get_logger(__name__)


def pipe(initial: tp.Any, *transforms: tp.Callable[[tp.Any], tp.Any]) -> tp.Any:
    """Apply ``transforms`` to ``initial`` one after another.

    Args:
        initial: The starting value.
        *transforms: Unary functions; each receives the previous result.

    Returns:
        The result of the last transform, or ``initial`` if none were given.
    """
    return reduce(lambda acc, f: f(acc), transforms, initial)


def flow(*transforms: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Compose functions left to right into a new function.

    Only the first function may accept several arguments; it receives whatever
    the composed function is called with. Every following function is unary.

    Args:
        *transforms: The first function, then unary functions applied in order
            to the running result.

    Returns:
        A function ``g`` with ``g(*args) == f_n(...f_2(f_1(*args)))``.

    Raises:
        ValueError: If no function is given or one of them is not callable.
    """
    if not transforms:
        raise ValueError("flow requires at least one function")
    for position, step in enumerate(transforms):
        if not callable(step):
            raise ValueError(f"flow step {position} is not callable: {step!r}")

    first, *rest = transforms

    def composed(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        return pipe(first(*args, **kwargs), *rest)

    return composed


def tap(side_effect: tp.Callable[[T], tp.Any]) -> tp.Callable[[T], T]:
    """Run ``side_effect`` on a value and pass the value on unchanged."""

    def tapped(value: T) -> T:
        side_effect(value)
        return value

    return tapped


def safe(transform: tp.Callable[[T], U]) -> tp.Callable[[tp.Any], tp.Any]:
    """Lift ``transform`` over ``None`` and ``NOT_FOUND``.

    The wrapped function returns either marker unchanged, and of the same
    kind, without calling ``transform``. Any other value is transformed.

    Args:
        transform: Function to apply to present values.

    Returns:
        The wrapped function.

    Example:
        >>> from flowkit import NOT_FOUND
        >>> double = safe(lambda x: x * 2)
        >>> double(5), double(None), double(NOT_FOUND)
        (10, None, NOT_FOUND)
    """

    def wrapped(value: tp.Any) -> tp.Any:
        if is_nullish(value):
            return value
        return transform(value)

    return wrapped


def safe_catch(transform: tp.Callable[[T], U], fallback: U) -> tp.Callable[[T], U]:
    """Apply ``transform``, returning ``fallback`` if it raises.

    Every ``Exception`` is caught, whatever its type. Interpreter-level
    exceptions such as ``KeyboardInterrupt`` still propagate.

    Args:
        transform: Function that may raise.
        fallback: Value returned in place of a raised exception.
    """

    def wrapped(value: T) -> U:
        try:
            return transform(value)
        except Exception as e:
            logger.debug(f"safe_catch returned fallback after {type(e).__name__}: {e}")
            return fallback

    return wrapped
