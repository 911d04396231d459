"""Comparators for :func:`flowkit.functional.array.sort_with` and ``sorted``.

A comparator takes two values and returns ``-1``, ``0`` or ``1``. Use
``functools.cmp_to_key`` to hand one to ``sorted`` directly.

Ordering rules:
    - Numeric comparators place NaN after every number, in ascending and
      descending order alike.
    - ``*_nullable`` variants additionally place ``None`` after NaN and
      ``NOT_FOUND`` after ``None``.
    - Text comparators collate in three levels, like a dictionary would:
      base letters first, then accents, then case. ``alphabetical`` also
      ignores punctuation and whitespace and puts upper case first.
    - ``alpha_locale`` takes the same options plus a locale and defers to
      ICU, so language-specific orderings apply. It needs the ``icu`` extra.

Examples:
    >>> from functools import cmp_to_key
    >>> sorted([30, float("nan"), 1, 5], key=cmp_to_key(numeric_asc))
    [1, 5, 30, nan]
    >>> sorted(["b", "a-c", "A", "a"], key=cmp_to_key(alphabetical))
    ['A', 'a', 'a-c', 'b']
"""

import math
import re
import typing as tp
import unicodedata

from flowkit.core.sentinels import NOT_FOUND
from flowkit.core.types import Comparator, T, U

__all__ = [
    "alpha_locale",
    "alpha_locale_nullable",
    "alphabetical",
    "alphabetical_nullable",
    "collator",
    "collator_nullable",
    "compare_by",
    "numeric_asc",
    "numeric_desc",
    "numeric_nullable_asc",
    "numeric_nullable_desc",
]

Sensitivity = tp.Literal["base", "accent", "case", "variant"]
CaseFirst = tp.Literal["upper", "lower"]

SENSITIVITIES = ("base", "accent", "case", "variant")
_DIGIT_RUN = re.compile(r"\d+|\D")
_ICU_STRENGTHS = {
    "base": "PRIMARY",
    "accent": "SECONDARY",
    "case": "PRIMARY",
    "variant": "TERTIARY",
}


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def _compare(a: tp.Any, b: tp.Any) -> int:
    return (a > b) - (a < b)


def _is_nan(x: tp.Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def _compare_absent(a: tp.Any, b: tp.Any) -> int | None:
    """Order ``None`` and ``NOT_FOUND`` after everything else.

    Returns ``None`` when neither argument is an absence marker.
    """
    if a is NOT_FOUND:
        return 0 if b is NOT_FOUND else 1
    if b is NOT_FOUND:
        return -1
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return -1
    return None


def _compare_numbers(x: float, y: float, descending: bool) -> int:
    if x < y:
        return 1 if descending else -1
    if x > y:
        return -1 if descending else 1
    if _is_nan(x):
        return 0 if _is_nan(y) else 1
    if _is_nan(y):
        return -1
    return 0


def numeric_asc(x: float, y: float) -> int:
    return _compare_numbers(x, y, descending=False)


def numeric_desc(x: float, y: float) -> int:
    return _compare_numbers(x, y, descending=True)


def numeric_nullable_asc(x: tp.Any, y: tp.Any) -> int:
    absent = _compare_absent(x, y)
    return absent if absent is not None else _compare_numbers(x, y, descending=False)


def numeric_nullable_desc(x: tp.Any, y: tp.Any) -> int:
    absent = _compare_absent(x, y)
    return absent if absent is not None else _compare_numbers(x, y, descending=True)


class _CollationKey(tp.NamedTuple):
    primary: tuple
    secondary: tuple
    tertiary: tuple


def _collation_key(
    text: str, numeric: bool, ignore_punctuation: bool, case_first: CaseFirst | None
) -> _CollationKey:
    primary: list[tuple] = []
    secondary: list[tuple] = []
    tertiary: list[int] = []

    tokens = _DIGIT_RUN.findall(text) if numeric else list(text)
    for token in tokens:
        if numeric and token.isdecimal():
            primary.append((0, int(token)))
            secondary.append(())
            continue
        category = unicodedata.category(token)
        if ignore_punctuation and (category[0] in "PZ" or token.isspace()):
            continue
        decomposed = unicodedata.normalize("NFD", token)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        marks = tuple(c for c in decomposed if unicodedata.combining(c))
        primary.append((1, base.casefold()))
        secondary.append(marks)
        if case_first == "upper":
            tertiary.append(0 if token.isupper() else 1)
        else:
            tertiary.append(0 if token.islower() else 1)

    return _CollationKey(tuple(primary), tuple(secondary), tuple(tertiary))


def _check_options(sensitivity: str, case_first: str | None) -> None:
    if sensitivity not in SENSITIVITIES:
        raise ValueError(
            f"Unknown sensitivity '{sensitivity}'. Expected one of {SENSITIVITIES}"
        )
    if case_first not in (None, "upper", "lower"):
        raise ValueError(
            f"Unknown case_first '{case_first}'. Expected 'upper', 'lower' or None"
        )


def _nullable(
    compare_values: tp.Callable[[tp.Any, tp.Any], int],
) -> tp.Callable[[tp.Any, tp.Any], int]:
    def compare(a: tp.Any, b: tp.Any) -> int:
        absent = _compare_absent(a, b)
        return absent if absent is not None else compare_values(a, b)

    return compare


def collator(
    *,
    numeric: bool = False,
    sensitivity: Sensitivity = "variant",
    ignore_punctuation: bool = False,
    case_first: CaseFirst | None = None,
) -> tp.Callable[[str, str], int]:
    """Build a text comparator from collation options.

    Args:
        numeric: Compare runs of digits by value, so ``"5" < "20"``.
        sensitivity: Which differences count. ``"base"`` compares letters
            only, ``"accent"`` adds accents, ``"case"`` adds case but not
            accents, ``"variant"`` compares everything.
        ignore_punctuation: Skip punctuation and whitespace.
        case_first: ``"upper"`` sorts ``"A"`` before ``"a"``; ``"lower"`` or
            ``None`` sorts lower case first.

    Returns:
        A comparator returning -1, 0 or 1.

    Raises:
        ValueError: If ``sensitivity`` or ``case_first`` is not recognised.
    """
    _check_options(sensitivity, case_first)

    use_accents = sensitivity in ("accent", "variant")
    use_case = sensitivity in ("case", "variant")

    def compare(a: str, b: str) -> int:
        ka = _collation_key(a, numeric, ignore_punctuation, case_first)
        kb = _collation_key(b, numeric, ignore_punctuation, case_first)
        result = _compare(ka.primary, kb.primary)
        if result == 0 and use_accents:
            result = _compare(ka.secondary, kb.secondary)
        if result == 0 and use_case:
            result = _compare(ka.tertiary, kb.tertiary)
        return _sign(result)

    return compare


def collator_nullable(
    *,
    numeric: bool = False,
    sensitivity: Sensitivity = "variant",
    ignore_punctuation: bool = False,
    case_first: CaseFirst | None = None,
) -> tp.Callable[[tp.Any, tp.Any], int]:
    """Like :func:`collator`, with ``None`` and then ``NOT_FOUND`` sorted last."""
    return _nullable(
        collator(
            numeric=numeric,
            sensitivity=sensitivity,
            ignore_punctuation=ignore_punctuation,
            case_first=case_first,
        )
    )


alphabetical = collator(ignore_punctuation=True, case_first="upper")
alphabetical_nullable = collator_nullable(ignore_punctuation=True, case_first="upper")


def alpha_locale(
    locales: str | tp.Sequence[str] | None = None,
    *,
    numeric: bool = False,
    sensitivity: Sensitivity = "variant",
    ignore_punctuation: bool = False,
    case_first: CaseFirst | None = None,
) -> tp.Callable[[str, str], int]:
    """Build a text comparator that follows a locale's collation rules.

    Backed by ICU through PyICU (``pip install flowkit[icu]``), so tailorings
    such as Swedish sorting ``"ä"`` after ``"z"`` apply. Options mean the same
    as in :func:`collator`.

    Args:
        locales: A BCP 47 tag such as ``"sv"`` or ``"de-DE"``, or a list of
            tags of which the first is used. ``None`` uses ICU's default
            locale.

    Returns:
        A comparator returning -1, 0 or 1.

    Raises:
        ValueError: If ``sensitivity`` or ``case_first`` is not recognised.
        ImportError: If PyICU is not installed.

    Example:
        >>> from functools import cmp_to_key
        >>> sorted(["z", "ä", "a"], key=cmp_to_key(alpha_locale("sv")))
        ['a', 'z', 'ä']
    """
    _check_options(sensitivity, case_first)

    import icu

    if isinstance(locales, str):
        locales = [locales]
    locale = icu.Locale.forLanguageTag(locales[0]) if locales else icu.Locale.getDefault()
    icu_collator = icu.Collator.createInstance(locale)

    attribute, value = icu.UCollAttribute, icu.UCollAttributeValue
    icu_collator.setAttribute(attribute.STRENGTH, getattr(value, _ICU_STRENGTHS[sensitivity]))
    if sensitivity == "case":
        icu_collator.setAttribute(attribute.CASE_LEVEL, value.ON)
    if numeric:
        icu_collator.setAttribute(attribute.NUMERIC_COLLATION, value.ON)
    if ignore_punctuation:
        icu_collator.setAttribute(attribute.ALTERNATE_HANDLING, value.SHIFTED)
    if case_first is not None:
        first = value.UPPER_FIRST if case_first == "upper" else value.LOWER_FIRST
        icu_collator.setAttribute(attribute.CASE_FIRST, first)

    return lambda a, b: _sign(icu_collator.compare(a, b))


def alpha_locale_nullable(
    locales: str | tp.Sequence[str] | None = None,
    *,
    numeric: bool = False,
    sensitivity: Sensitivity = "variant",
    ignore_punctuation: bool = False,
    case_first: CaseFirst | None = None,
) -> tp.Callable[[tp.Any, tp.Any], int]:
    """Like :func:`alpha_locale`, with ``None`` and then ``NOT_FOUND`` sorted last."""
    return _nullable(
        alpha_locale(
            locales,
            numeric=numeric,
            sensitivity=sensitivity,
            ignore_punctuation=ignore_punctuation,
            case_first=case_first,
        )
    )


def compare_by(key: tp.Callable[[T], U], comparator: Comparator) -> Comparator:
    """Compare two values by a derived property.

    Example:
        >>> by_age = compare_by(lambda p: p["age"], numeric_asc)
        >>> by_age({"age": 40}, {"age": 30})
        1
    """
    return lambda x, y: comparator(key(x), key(y))
