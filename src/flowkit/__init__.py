"""flowkit: curried, point-free helpers for everyday data wrangling.

Examples:
    >>> from flowkit import pipe, array as A, number as N
    >>> pipe([1, 2, 3, 4], A.filter(N.is_even), A.map(N.pow(2)), A.sum)
    20
"""

from flowkit.core.config import settings
from flowkit.core.indexing import is_integer, normalize_index
from flowkit.core.sentinels import NOT_FOUND, NotFound, is_not_found
from flowkit.functional import (
    array,
    comparator,
    guard,
    logic,
    number,
    pojo,
    result,
    string,
)
from flowkit.functional.pipe import flow, pipe, safe, safe_catch, tap

__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "array",
    "comparator",
    "flow",
    "guard",
    "is_integer",
    "is_not_found",
    "logic",
    "normalize_index",
    "number",
    "pipe",
    "pojo",
    "result",
    "safe",
    "safe_catch",
    "settings",
    "string",
    "tap",
]
