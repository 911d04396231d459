"""Curried operations over sequences.

Every factory here takes its configuration first and returns a function of the
sequence, so the functions slot straight into :func:`flowkit.pipe`:

    >>> from flowkit import pipe
    >>> from flowkit.functional import array as A, number as N
    >>> pipe([3, -1, 4, -1, 5], A.filter(N.is_positive), A.map(N.multiply(10)))
    [30, 40, 50]

Inputs may be any sequence and are never mutated. Results that are sequences
are always new ``list`` objects.

Positional arguments go through :func:`flowkit.core.indexing.normalize_index`,
so negative indices count from the end and the same two markers come back
everywhere:

    - ``None`` when the index is not an integer (``get(1.5)``).
    - ``NOT_FOUND`` when the index is outside the sequence (``get(10)``).

Transforms that cannot return a marker fall back to an empty list or an
unchanged copy instead; each function documents which.

Note:
    Several names (``map``, ``filter``, ``sum``, ``slice``, ...) shadow
    builtins inside this module. Import the module as a namespace rather
    than with ``from ... import *``.
"""

import builtins
import functools
import itertools
import math
import typing as tp

from flowkit.core.config import settings
from flowkit.core.indexing import (
    as_integer,
    is_append_position,
    is_integer,
    normalize_index,
)
from flowkit.core.sentinels import NOT_FOUND
from flowkit.core.types import Predicate, T, U
from flowkit.functional.logic import strict_equals
from flowkit.logger.logger import get_logger

__all__ = [
    "all",
    "any",
    "aperture",
    "append",
    "chunk",
    "concat",
    "count",
    "create_range",
    "create_with",
    "drop",
    "drop_last",
    "filter",
    "filter_with_index",
    "find",
    "find_all_indices",
    "find_index",
    "find_last",
    "find_last_index",
    "find_right_slice",
    "find_slice",
    "first",
    "flatten",
    "get",
    "includes",
    "insert",
    "is_empty",
    "join",
    "last",
    "length",
    "map",
    "map_with_index",
    "mean",
    "mean_with",
    "none",
    "prepend",
    "product",
    "reduce",
    "reduce_right",
    "reduce_right_with_index",
    "reduce_with_index",
    "reject",
    "remove",
    "replace",
    "replace_slice",
    "reverse",
    "satisfies",
    "set",
    "slice",
    "slice_satisfies",
    "sort_with",
    "split",
    "split_multi",
    "sum",
    "sum_with",
    "take",
    "take_last",
    "unique",
    "update",
]

logger = get_logger(__name__)
Seq = tp.Sequence[T]


def _as_items(elems: tp.Any) -> list:
    """Splice a ``list`` argument, wrap anything else as a single element."""
    return list(elems) if isinstance(elems, list) else [elems]


# ---------------------------------------------------------------------------
# Predicates over the whole sequence
# ---------------------------------------------------------------------------


def all(condition: Predicate) -> tp.Callable[[Seq], bool]:
    """True if every element satisfies ``condition`` (True when empty)."""
    return lambda seq: builtins.all(condition(x) for x in seq)


def any(condition: Predicate) -> tp.Callable[[Seq], bool]:
    """True if some element satisfies ``condition`` (False when empty)."""
    return lambda seq: builtins.any(condition(x) for x in seq)


def none(condition: Predicate) -> tp.Callable[[Seq], bool]:
    """True if no element satisfies ``condition`` (True when empty)."""
    return lambda seq: not builtins.any(condition(x) for x in seq)


def includes(elem: tp.Any) -> tp.Callable[[Seq], bool]:
    """Membership test that never matches a bool against a number and finds NaN."""
    return lambda seq: builtins.any(strict_equals(x, elem) for x in seq)


def is_empty(seq: Seq) -> bool:
    return len(seq) == 0


def length(seq: Seq) -> int:
    return len(seq)


def count(condition: Predicate) -> tp.Callable[[Seq], int]:
    return lambda seq: builtins.sum(1 for x in seq if condition(x))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def create_range(
    start: float,
    end: float,
    *,
    intervals: int | None = None,
    points: int | None = None,
    space: float | None = None,
) -> list[float]:
    """Evenly spaced values from ``start`` to ``end`` inclusive.

    Exactly one way of choosing the number of values is used. When several are
    given, ``space`` wins over ``points``, which wins over ``intervals``.

    Args:
        start: First value.
        end: Last value. It is returned exactly, without rounding drift.
        intervals: Number of gaps between values (integer >= 1).
        points: Number of values (integer >= 2).
        space: Approximate distance between values; the count is rounded so
            that the values still land on ``start`` and ``end``.

    Returns:
        The values, or ``[]`` if no valid count was given.

    Example:
        >>> create_range(0, 1, intervals=4)
        [0.0, 0.25, 0.5, 0.75, 1]
    """
    n: int | None = None
    if is_integer(intervals) and intervals >= 1:
        n = int(intervals) + 1
    if is_integer(points) and points >= 2:
        n = int(points)
    if space is not None and space != 0 and math.isfinite(space):
        n = max(builtins.round(abs((end - start) / space)) + 1, 2)
    if n is None:
        return []

    step = (end - start) / (n - 1)
    values = [start + k * step for k in range(n)]
    values[-1] = end
    return values


def create_with(
    length: int, f: tp.Callable[[int], T], max_length: int | None = None
) -> list[T] | None:
    """Build ``[f(0), f(1), ..., f(length - 1)]``.

    Args:
        length: Number of elements.
        f: Called with each index in turn.
        max_length: Largest length accepted. Defaults to
            ``settings.MAX_CREATE_LENGTH``.

    Returns:
        The new list, or ``None`` if ``length`` is not a non-negative integer
        or exceeds ``max_length``.
    """
    cap = settings.MAX_CREATE_LENGTH if max_length is None else max_length
    n = as_integer(length)
    if n is None or n < 0 or n > cap:
        logger.debug(f"create_with rejected length {length!r} (max_length={cap})")
        return None
    return [f(i) for i in range(n)]


def concat(arrays: tp.Sequence[tp.Any]) -> list:
    """Concatenate lists; members that are not lists count as one element."""
    return list(itertools.chain.from_iterable(_as_items(a) for a in arrays))


# ---------------------------------------------------------------------------
# Element transforms
# ---------------------------------------------------------------------------


def map(transform: tp.Callable[[T], U]) -> tp.Callable[[Seq], list[U]]:
    return lambda seq: [transform(x) for x in seq]


def map_with_index(transform: tp.Callable[[int, T], U]) -> tp.Callable[[Seq], list[U]]:
    """Map with ``transform(index, element)``."""
    return lambda seq: [transform(i, x) for i, x in enumerate(seq)]


def filter(condition: Predicate) -> tp.Callable[[Seq], list]:
    return lambda seq: [x for x in seq if condition(x)]


def filter_with_index(condition: tp.Callable[[int, T], bool]) -> tp.Callable[[Seq], list]:
    """Keep elements for which ``condition(index, element)`` holds."""
    return lambda seq: [x for i, x in enumerate(seq) if condition(i, x)]


def reject(condition: Predicate) -> tp.Callable[[Seq], list]:
    return lambda seq: [x for x in seq if not condition(x)]


def replace(condition: Predicate, transform: tp.Callable[[T], U]) -> tp.Callable[[Seq], list]:
    """Transform only the elements that satisfy ``condition``."""
    return lambda seq: [transform(x) if condition(x) else x for x in seq]


def flatten(levels: int | float = 1) -> tp.Callable[[Seq], list]:
    """Flatten nested lists by up to ``levels`` levels.

    Pass ``math.inf`` to flatten completely. Only ``list`` members are
    flattened; tuples and strings are kept whole.
    """

    def _flatten(seq: tp.Iterable, depth: int | float) -> list:
        out: list = []
        for x in seq:
            if isinstance(x, list) and depth > 0:
                out.extend(_flatten(x, depth - 1))
            else:
                out.append(x)
        return out

    return lambda seq: _flatten(seq, levels)


def reverse(seq: Seq) -> list:
    return list(seq)[::-1]


def unique(seq: Seq) -> list:
    """Drop repeated elements, keeping the first occurrence of each."""
    seen: builtins.set = builtins.set()
    unhashable: list = []
    out: list = []
    for x in seq:
        try:
            if x in seen:
                continue
            seen.add(x)
        except TypeError:
            if builtins.any(x == y for y in unhashable):
                continue
            unhashable.append(x)
        out.append(x)
    return out


def sort_with(comparator: tp.Callable[[T, T], int]) -> tp.Callable[[Seq], list[T]]:
    """Stable sort using a ``(a, b) -> int`` comparator.

    See :mod:`flowkit.functional.comparator` for ready-made comparators.
    """
    key = functools.cmp_to_key(comparator)
    return lambda seq: sorted(seq, key=key)


def join(separator: str = "") -> tp.Callable[[Seq], str]:
    return lambda seq: separator.join(str(x) for x in seq)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def find(condition: Predicate) -> tp.Callable[[Seq], tp.Any]:
    """First element satisfying ``condition``, or ``NOT_FOUND``."""
    return lambda seq: next((x for x in seq if condition(x)), NOT_FOUND)


def find_last(condition: Predicate) -> tp.Callable[[Seq], tp.Any]:
    """Last element satisfying ``condition``, or ``NOT_FOUND``."""

    def search(seq: Seq) -> tp.Any:
        for i in range(len(seq) - 1, -1, -1):
            if condition(seq[i]):
                return seq[i]
        return NOT_FOUND

    return search


def find_index(condition: Predicate) -> tp.Callable[[Seq], tp.Any]:
    """Index of the first element satisfying ``condition``, or ``NOT_FOUND``."""
    return lambda seq: next((i for i, x in enumerate(seq) if condition(x)), NOT_FOUND)


def find_last_index(condition: Predicate) -> tp.Callable[[Seq], tp.Any]:
    """Index of the last element satisfying ``condition``, or ``NOT_FOUND``."""

    def search(seq: Seq) -> tp.Any:
        for i in range(len(seq) - 1, -1, -1):
            if condition(seq[i]):
                return i
        return NOT_FOUND

    return search


def find_all_indices(condition: Predicate) -> tp.Callable[[Seq], list[int]]:
    return lambda seq: [i for i, x in enumerate(seq) if condition(x)]


def find_slice(condition: tp.Callable[[list], bool]) -> tp.Callable[[Seq], tp.Any]:
    """Shortest prefix for which ``condition`` holds, or ``NOT_FOUND``.

    Prefixes are tried from ``[]`` up to the whole sequence.

    Example:
        >>> two_positive = lambda s: sum(x > 0 for x in s) >= 2
        >>> find_slice(two_positive)([2, -4, 1, -5, 6])
        [2, -4, 1]
    """

    def search(seq: Seq) -> tp.Any:
        items = list(seq)
        for end in range(len(items) + 1):
            prefix = items[:end]
            if condition(prefix):
                return prefix
        return NOT_FOUND

    return search


def find_right_slice(condition: tp.Callable[[list], bool]) -> tp.Callable[[Seq], tp.Any]:
    """Shortest non-empty suffix for which ``condition`` holds, or ``NOT_FOUND``."""

    def search(seq: Seq) -> tp.Any:
        items = list(seq)
        for start in range(len(items) - 1, -1, -1):
            suffix = items[start:]
            if condition(suffix):
                return suffix
        return NOT_FOUND

    return search


# ---------------------------------------------------------------------------
# Positional access
# ---------------------------------------------------------------------------


def first(seq: Seq) -> tp.Any:
    return seq[0] if len(seq) > 0 else NOT_FOUND


def last(seq: Seq) -> tp.Any:
    return seq[-1] if len(seq) > 0 else NOT_FOUND


def get(index: int) -> tp.Callable[[Seq], tp.Any]:
    """Element at ``index``; ``None`` if invalid, ``NOT_FOUND`` if out of range.

    Example:
        >>> get(-2)([3, 4, 5, 6, 7]), get(5)([3, 4, 5, 6, 7])
        (6, NOT_FOUND)
    """

    def getter(seq: Seq) -> tp.Any:
        i = normalize_index(len(seq), index)
        return seq[i] if isinstance(i, int) else i

    return getter


def satisfies(index: int, condition: Predicate) -> tp.Callable[[Seq], bool]:
    """Check the element at ``index``; unaddressable positions give False."""

    def check(seq: Seq) -> bool:
        i = normalize_index(len(seq), index)
        return bool(condition(seq[i])) if isinstance(i, int) else False

    return check


def slice_satisfies(
    start: int, conditions: tp.Sequence[Predicate]
) -> tp.Callable[[Seq], bool]:
    """Check consecutive elements from ``start`` against ``conditions`` pairwise.

    ``conditions[k]`` is applied to the element at ``start + k``. The result is
    False if ``start`` is not addressable or the sequence ends before every
    condition has been used.
    """

    def check(seq: Seq) -> bool:
        i = normalize_index(len(seq), start)
        if not isinstance(i, int):
            return False
        if i + len(conditions) > len(seq):
            return False
        return builtins.all(cond(seq[i + k]) for k, cond in enumerate(conditions))

    return check


def set(index: int, value: tp.Any) -> tp.Callable[[Seq], list]:
    """Copy with the element at ``index`` replaced.

    An unaddressable ``index`` returns an unchanged copy.
    """
    return update(index, lambda _: value)


def update(index: int, transform: tp.Callable[[T], T]) -> tp.Callable[[Seq], list]:
    """Copy with ``transform`` applied to the element at ``index``.

    An unaddressable ``index`` returns an unchanged copy.
    """

    def updater(seq: Seq) -> list:
        out = list(seq)
        i = normalize_index(len(out), index)
        if isinstance(i, int):
            out[i] = transform(out[i])
        return out

    return updater


def insert(index: int, elems: tp.Any) -> tp.Callable[[Seq], list]:
    """Insert ``elems`` before the element at ``index``.

    A ``list`` is spliced in, anything else is inserted as one element. An
    ``index`` equal to the length appends. Any other unaddressable ``index``
    returns an unchanged copy.

    Example:
        >>> insert(2, [10, 11])([0, 1, 2, 3, 4])
        [0, 1, 10, 11, 2, 3, 4]
    """
    items = _as_items(elems)

    def inserter(seq: Seq) -> list:
        out = list(seq)
        i = normalize_index(len(out), index)
        if isinstance(i, int):
            return out[:i] + items + out[i:]
        if is_append_position(len(out), index):
            return out + items
        return out

    return inserter


def remove(start: int, end: int | None = None) -> tp.Callable[[Seq], list]:
    """Remove one element, or the slice ``[start:end]``.

    Without ``end`` the element at the normalized ``start`` is removed; an
    out-of-range ``start`` leaves the sequence as is. With ``end`` the bounds
    follow Python slicing. Non-integer bounds return an unchanged copy.
    """
    if not is_integer(start) or (end is not None and not is_integer(end)):
        return lambda seq: list(seq)

    def remover(seq: Seq) -> list:
        out = list(seq)
        if end is None:
            i = normalize_index(len(out), start)
            return out[:i] + out[i + 1 :] if isinstance(i, int) else out
        lo, hi, _ = builtins.slice(int(start), int(end)).indices(len(out))
        return out[:lo] + out[hi:] if lo < hi else out

    return remover


def replace_slice(
    start: int, end: int, replacement: tp.Sequence[T]
) -> tp.Callable[[Seq], list]:
    """Replace the elements in ``[start, end)`` with ``replacement``.

    Negative bounds count from the end and both bounds are clamped to the
    sequence. An empty range or non-integer bounds return an unchanged copy.
    """
    if not (is_integer(start) and is_integer(end)):
        return lambda seq: list(seq)

    def replacer(seq: Seq) -> list:
        out = list(seq)
        n = len(out)
        lo = max(0, int(start) if start >= 0 else n + int(start))
        hi = min(n, int(end) if end >= 0 else n + int(end))
        if lo >= hi:
            return out
        return out[:lo] + list(replacement) + out[hi:]

    return replacer


def append(elems: tp.Any) -> tp.Callable[[Seq], list]:
    items = _as_items(elems)
    return lambda seq: list(seq) + items


def prepend(elems: tp.Any) -> tp.Callable[[Seq], list]:
    items = _as_items(elems)
    return lambda seq: items + list(seq)


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------


def slice(start: int | None = None, end: int | None = None) -> tp.Callable[[Seq], list]:
    """Python slicing ``seq[start:end]``; non-integer bounds give ``[]``."""
    if (start is not None and not is_integer(start)) or (
        end is not None and not is_integer(end)
    ):
        return lambda seq: []
    lo = as_integer(start)
    hi = as_integer(end)
    return lambda seq: list(seq[lo:hi])


def take(n: int) -> tp.Callable[[Seq], list]:
    """First ``n`` elements.

    Returns ``[]`` when ``n`` is not a positive integer or exceeds the length.
    """
    if not is_integer(n) or n <= 0:
        return lambda seq: []
    k = int(n)
    return lambda seq: list(seq[:k]) if k <= len(seq) else []


def take_last(n: int) -> tp.Callable[[Seq], list]:
    """Last ``n`` elements, under the same rules as :func:`take`."""
    if not is_integer(n) or n <= 0:
        return lambda seq: []
    k = int(n)
    return lambda seq: list(seq[-k:]) if k <= len(seq) else []


def drop(n: int) -> tp.Callable[[Seq], list]:
    """All but the first ``n`` elements.

    ``n == 0`` copies the sequence; a negative or non-integer ``n`` gives ``[]``.
    """
    if not is_integer(n) or n < 0:
        return lambda seq: []
    k = int(n)
    return lambda seq: list(seq[k:])


def drop_last(n: int) -> tp.Callable[[Seq], list]:
    """All but the last ``n`` elements, under the same rules as :func:`drop`."""
    if not is_integer(n) or n < 0:
        return lambda seq: []
    k = int(n)
    return lambda seq: list(seq[: len(seq) - k]) if k < len(seq) else []


def aperture(size: int) -> tp.Callable[[Seq], list[list]]:
    """Every run of ``size`` consecutive elements.

    Example:
        >>> aperture(3)([2, 4, 6, 8, 10])
        [[2, 4, 6], [4, 6, 8], [6, 8, 10]]
    """
    if not is_integer(size) or size < 1:
        return lambda seq: []
    k = int(size)
    return lambda seq: [list(seq[i : i + k]) for i in range(len(seq) - k + 1)]


def chunk(size: int, use_remaining: bool = True) -> tp.Callable[[Seq], list[list]]:
    """Split into consecutive chunks of ``size`` elements.

    Args:
        size: Chunk length (integer >= 1).
        use_remaining: Keep the shorter final chunk, if any.

    Returns:
        A function producing the chunks, or ``[[]]`` for an invalid ``size``.
    """
    if not is_integer(size) or size < 1:
        return lambda seq: [[]]
    k = int(size)

    def chunker(seq: Seq) -> list[list]:
        n = math.ceil(len(seq) / k) if use_remaining else len(seq) // k
        return [list(seq[j * k : (j + 1) * k]) for j in range(n)]

    return chunker


def split(index: int) -> tp.Callable[[Seq], list[list] | None]:
    """``[seq[:index], seq[index:]]``; a non-integer ``index`` gives ``None``.

    Example:
        >>> split(-1)([0, 1, 2, 3, 4])
        [[0, 1, 2, 3], [4]]
    """

    def splitter(seq: Seq) -> list[list] | None:
        i = as_integer(index)
        if i is None:
            return None
        return [list(seq[:i]), list(seq[i:])]

    return splitter


def split_multi(indices: tp.Sequence[int]) -> tp.Callable[[Seq], list[list] | None]:
    """Cut the sequence at each of ``indices`` in turn.

    Cuts follow Python slicing, so negative indices count from the end and
    out-of-order cuts produce empty parts. Any non-integer index gives
    ``None``.
    """

    def splitter(seq: Seq) -> list[list] | None:
        if not builtins.all(is_integer(i) for i in indices):
            return None
        bounds = [0, *(int(i) for i in indices), None]
        return [list(seq[lo:hi]) for lo, hi in zip(bounds, bounds[1:])]

    return splitter


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def sum(seq: tp.Sequence[float]) -> float:
    return builtins.sum(seq, 0)


def sum_with(transform: tp.Callable[[T], float]) -> tp.Callable[[Seq], float]:
    return lambda seq: builtins.sum((transform(x) for x in seq), 0)


def product(seq: tp.Sequence[float]) -> tp.Any:
    """Product of the elements, or ``NOT_FOUND`` when empty."""
    return math.prod(seq) if len(seq) > 0 else NOT_FOUND


def mean(seq: tp.Sequence[float]) -> float:
    """Arithmetic mean; ``nan`` when empty."""
    return builtins.sum(seq, 0) / len(seq) if len(seq) > 0 else math.nan


def mean_with(transform: tp.Callable[[T], float]) -> tp.Callable[[Seq], float]:
    return lambda seq: mean([transform(x) for x in seq])


def _fold(
    accumulator: tp.Callable[..., tp.Any],
    initial: tp.Any,
    indexed: list[tuple[int, tp.Any]],
    with_index: bool,
) -> tp.Any:
    if initial is NOT_FOUND:
        if not indexed:
            return NOT_FOUND
        (_, acc), rest = indexed[0], indexed[1:]
    else:
        acc, rest = initial, indexed
    for i, x in rest:
        acc = accumulator(acc, x, i) if with_index else accumulator(acc, x)
    return acc


def reduce(
    accumulator: tp.Callable[[U, T], U], initial: tp.Any = NOT_FOUND
) -> tp.Callable[[Seq], tp.Any]:
    """Left fold with ``accumulator(acc, element)``.

    Without ``initial`` the first element seeds the fold, and an empty
    sequence gives ``NOT_FOUND``.

    Example:
        >>> reduce(lambda acc, x: acc + x, "reduced: ")(["a", "b", "c"])
        'reduced: abc'
    """
    return lambda seq: _fold(accumulator, initial, list(enumerate(seq)), False)


def reduce_right(
    accumulator: tp.Callable[[U, T], U], initial: tp.Any = NOT_FOUND
) -> tp.Callable[[Seq], tp.Any]:
    """Right fold; otherwise the same as :func:`reduce`."""
    return lambda seq: _fold(accumulator, initial, list(enumerate(seq))[::-1], False)


def reduce_with_index(
    accumulator: tp.Callable[[U, T, int], U], initial: tp.Any = NOT_FOUND
) -> tp.Callable[[Seq], tp.Any]:
    """Left fold with ``accumulator(acc, element, index)``."""
    return lambda seq: _fold(accumulator, initial, list(enumerate(seq)), True)


def reduce_right_with_index(
    accumulator: tp.Callable[[U, T, int], U], initial: tp.Any = NOT_FOUND
) -> tp.Callable[[Seq], tp.Any]:
    """Right fold with ``accumulator(acc, element, index)``.

    Indices refer to positions in the original sequence.
    """
    return lambda seq: _fold(accumulator, initial, list(enumerate(seq))[::-1], True)
