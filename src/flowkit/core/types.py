"""Reusable type definitions for flowkit.

This module provides the callable aliases shared by the functional namespaces
and the constrained numeric types used by the settings model.

Type Aliases:
    Predicate: A unary function returning a boolean.
    Comparator: A binary function returning -1, 0 or 1.
    NonNegativeInt: An int validated to be >= 0.
    NonNegativeFloat: A float validated to be >= 0.
    LogLevel: One of the standard logging level names.
"""

import typing as tp

import annotated_types as at

__all__ = [
    "T",
    "U",
    "K",
    "Predicate",
    "Comparator",
    "NonNegativeInt",
    "NonNegativeFloat",
    "LogLevel",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
K = tp.TypeVar("K")

Predicate = tp.Callable[[T], bool]
Comparator = tp.Callable[[T, T], int]

NonNegativeInt = tp.Annotated[int, at.Ge(0)]
NonNegativeFloat = tp.Annotated[float, at.Ge(0)]

LogLevel = tp.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
