"""Conventions shared by every flowkit namespace."""

from flowkit.core.sentinels import NOT_FOUND, NotFound, is_not_found, is_nullish
from flowkit.core.indexing import is_integer, normalize_index
from flowkit.core.config import Settings, settings

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "is_not_found",
    "is_nullish",
    "is_integer",
    "normalize_index",
    "Settings",
    "settings",
]
