"""Functional primitives for flowkit.

This package holds the curried, point-free namespaces of the library. Each
module is a flat collection of stateless, side-effect-free functions meant to
be composed with :func:`flowkit.functional.pipe.pipe` and
:func:`flowkit.functional.pipe.flow`:

    - ``array``: sequences (``list``, ``tuple``, ...)
    - ``string``: text
    - ``pojo``: plain records (``dict``)
    - ``number``: arithmetic and numeric predicates
    - ``logic``: predicate combinators and branching
    - ``comparator``: sort orders for ``array.sort_with``
    - ``guard``: runtime type checks
    - ``result``: helpers for ``None`` and ``NOT_FOUND``
"""
