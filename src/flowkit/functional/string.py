"""Curried string operations.

Positional helpers share :func:`flowkit.core.indexing.normalize_index` with
the sequence namespace, so ``get(1.5)`` is ``None`` and ``get(10)`` is
``NOT_FOUND`` for strings exactly as for lists.

Patterns may be given as strings or compiled ``re.Pattern`` objects:

    >>> import re
    >>> from flowkit.functional import string as S
    >>> S.matches(r"[ae]")("weasel")
    ['e', 'a', 'e']
    >>> S.match_groups(re.compile(r"(\\d),(\\d)"))("(4,6) (3,2)")
    ['4,6', '4', '6']
"""

import re
import typing as tp

from flowkit.core.indexing import (
    as_integer,
    is_append_position,
    is_integer,
    normalize_index,
)
from flowkit.core.sentinels import NOT_FOUND

__all__ = [
    "append",
    "concat",
    "ends_with",
    "get",
    "includes",
    "includes_regex",
    "insert",
    "length",
    "match_groups",
    "match_groups_all",
    "matches",
    "pad_left",
    "pad_right",
    "prepend",
    "replace",
    "replace_all",
    "slice",
    "split",
    "starts_with",
    "to_lower_case",
    "to_upper_case",
    "trim",
    "trim_left",
    "trim_right",
]

Pattern = tp.Union[str, re.Pattern]
Replacement = tp.Union[str, tp.Callable[[str], str]]


def _compile(pattern: Pattern) -> re.Pattern:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def _groups(match: re.Match) -> list:
    return [match.group(0), *match.groups()]


def append(suffix: str) -> tp.Callable[[str], str]:
    return lambda s: s + suffix


def prepend(prefix: str) -> tp.Callable[[str], str]:
    return lambda s: prefix + s


def concat(*parts: str) -> tp.Callable[[str], str]:
    """Append every part in order."""
    return lambda s: s + "".join(parts)


def starts_with(prefix: str) -> tp.Callable[[str], bool]:
    return lambda s: s.startswith(prefix)


def ends_with(suffix: str) -> tp.Callable[[str], bool]:
    return lambda s: s.endswith(suffix)


def includes(substring: str) -> tp.Callable[[str], bool]:
    return lambda s: substring in s


def includes_regex(pattern: Pattern) -> tp.Callable[[str], bool]:
    """Check if ``pattern`` matches anywhere in the string."""
    regex = _compile(pattern)
    return lambda s: regex.search(s) is not None


def length(s: str) -> int:
    return len(s)


def get(index: int) -> tp.Callable[[str], tp.Any]:
    """Character at ``index``; ``None`` if invalid, ``NOT_FOUND`` if out of range."""

    def getter(s: str) -> tp.Any:
        i = normalize_index(len(s), index)
        return s[i] if isinstance(i, int) else i

    return getter


def insert(index: int, text: str) -> tp.Callable[[str], str]:
    """Insert ``text`` before the character at ``index``.

    An ``index`` equal to the length appends; any other unaddressable
    ``index`` leaves the string unchanged.

    Example:
        >>> insert(2, "__")("gray"), insert(-1, "__")("gray"), insert(4, "__")("gray")
        ('gr__ay', 'gra__y', 'gray__')
    """

    def inserter(s: str) -> str:
        i = normalize_index(len(s), index)
        if isinstance(i, int):
            return s[:i] + text + s[i:]
        if is_append_position(len(s), index):
            return s + text
        return s

    return inserter


def slice(start: int, end: int | None = None) -> tp.Callable[[str], str]:
    """Python slicing ``s[start:end]``; non-integer bounds give ``""``."""
    if not is_integer(start) or (end is not None and not is_integer(end)):
        return lambda s: ""
    lo = as_integer(start)
    hi = as_integer(end)
    return lambda s: s[lo:hi]


def split(separator: str) -> tp.Callable[[str], list[str]]:
    """Split on ``separator``; an empty separator splits into characters."""
    if separator == "":
        return lambda s: list(s)
    return lambda s: s.split(separator)


def _pad(length: int, fill: str, left: bool) -> tp.Callable[[str], str | None]:
    if not is_integer(length):
        return lambda s: None
    length = as_integer(length)

    def padder(s: str) -> str | None:
        if len(s) >= length:
            return s
        if fill == "":
            return None
        missing = length - len(s)
        repeats = -(-missing // len(fill))
        padding = (fill * repeats)[:missing]
        return padding + s if left else s + padding

    return padder


def pad_left(length: int, fill: str = " ") -> tp.Callable[[str], str | None]:
    """Left-pad to ``length`` by cycling ``fill``.

    Strings already long enough are returned as is. An empty ``fill`` cannot
    pad and gives ``None``, as does a non-integer ``length``.

    Example:
        >>> pad_left(10, "_.")("weasel"), pad_left(10, "_.")("aweasel")
        ('_._.weasel', '_._aweasel')
    """
    return _pad(length, fill, left=True)


def pad_right(length: int, fill: str = " ") -> tp.Callable[[str], str | None]:
    """Right-pad to ``length`` by cycling ``fill``; see :func:`pad_left`."""
    return _pad(length, fill, left=False)


def matches(pattern: Pattern) -> tp.Callable[[str], tp.Any]:
    """Every matched substring, or ``NOT_FOUND`` if there is no match."""
    regex = _compile(pattern)

    def find(s: str) -> tp.Any:
        found = [m.group(0) for m in regex.finditer(s)]
        return found if found else NOT_FOUND

    return find


def match_groups(pattern: Pattern) -> tp.Callable[[str], tp.Any]:
    """``[whole match, *groups]`` of the first match, or ``NOT_FOUND``."""
    regex = _compile(pattern)

    def find(s: str) -> tp.Any:
        m = regex.search(s)
        return _groups(m) if m else NOT_FOUND

    return find


def match_groups_all(pattern: Pattern) -> tp.Callable[[str], list[list]]:
    """``[whole match, *groups]`` for every match, in order."""
    regex = _compile(pattern)
    return lambda s: [_groups(m) for m in regex.finditer(s)]


def _substitute(target: Pattern, replacement: Replacement, count: int) -> tp.Callable[[str], str]:
    regex = re.compile(re.escape(target)) if isinstance(target, str) else target

    # Replacement text is literal: backslashes are not group references
    def repl(m: re.Match) -> str:
        return replacement(m.group(0)) if callable(replacement) else replacement

    return lambda s: regex.sub(repl, s, count=count)


def replace(target: Pattern, replacement: Replacement) -> tp.Callable[[str], str]:
    """Replace the first occurrence of ``target``.

    Args:
        target: Literal text, or a compiled pattern.
        replacement: Literal text, or a function receiving the matched text.

    Example:
        >>> replace("e", str.upper)("weasel")
        'wEasel'
    """
    return _substitute(target, replacement, count=1)


def replace_all(target: Pattern, replacement: Replacement) -> tp.Callable[[str], str]:
    """Replace every occurrence of ``target``; see :func:`replace`."""
    return _substitute(target, replacement, count=0)


def to_lower_case(s: str) -> str:
    return s.lower()


def to_upper_case(s: str) -> str:
    return s.upper()


def trim(s: str) -> str:
    return s.strip()


def trim_left(s: str) -> str:
    return s.lstrip()


def trim_right(s: str) -> str:
    return s.rstrip()
