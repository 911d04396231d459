"""Index normalization shared by the sequence and string namespaces.

Positional helpers (``get``, ``set``, ``insert``, ``remove``, ...) accept the
same kinds of index: non-negative integers count from the start, negative
integers count from the end. Both container kinds go through
:func:`normalize_index` so their edge cases cannot drift apart.

Policy:
    ============================  ======================
    index ``i`` (length ``L``)    result
    ============================  ======================
    not an integer / NaN          ``None`` (invalid)
    ``0 <= i < L``                ``i``
    ``-L <= i < 0``               ``L + i``
    ``i >= L`` or ``i < -L``      ``NOT_FOUND``
    ============================  ======================

``i == L`` is out of range here. Insert-like operations treat it as the
append position themselves, see :func:`is_append_position`.
"""

import math
import numbers
import typing as tp

from flowkit.core.sentinels import NOT_FOUND, NotFound

__all__ = ["is_integer", "as_integer", "normalize_index", "is_append_position"]


def is_integer(value: tp.Any) -> bool:
    """Check if a value is a whole number.

    Integral floats such as ``2.0`` or ``1e6`` count as integers. Booleans,
    NaN, infinities and non-numbers do not.

    Args:
        value: Any object.

    Returns:
        bool: True if ``value`` can be used as an index or a count.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def as_integer(value: tp.Any) -> int | None:
    """Convert a whole number to ``int``; anything else becomes ``None``."""
    return int(value) if is_integer(value) else None


def normalize_index(length: int, index: tp.Any) -> int | None | NotFound:
    """Resolve a possibly negative index against a container length.

    Args:
        length: Length of the container (>= 0).
        index: The requested position.

    Returns:
        The equivalent index in ``[0, length)``, ``None`` if ``index`` is not an
        integer, or ``NOT_FOUND`` if it falls outside the container.

    Examples:
        >>> normalize_index(5, -2)
        3
        >>> normalize_index(5, 5)
        NOT_FOUND
        >>> normalize_index(5, 1.5) is None
        True
    """
    i = as_integer(index)
    if i is None:
        return None
    if i >= length or i < -length:
        return NOT_FOUND
    return i if i >= 0 else length + i


def is_append_position(length: int, index: tp.Any) -> bool:
    """Check if ``index`` addresses the slot just past the last element."""
    return as_integer(index) == length
