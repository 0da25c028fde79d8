"""Lazy, order-preserving set operations over ordered collections.

Each function takes two collections that can be iterated in order and
tested for membership.  The result is an iterator that yields values in a
fixed, documented order rather than in hash order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator
from itertools import chain
from typing import Any


def difference(first: Collection[Any], second: Collection[Any]) -> Iterator[Any]:
    """Yield the values of ``first`` that are not in ``second``.

    Values come in the order they appear in ``first``.
    """
    return (value for value in first if value not in second)


def intersection(first: Collection[Any], second: Collection[Any]) -> Iterator[Any]:
    """Yield the values of ``first`` that are also in ``second``.

    Values come in the order they appear in ``first``.
    """
    return (value for value in first if value in second)


def symmetric_difference(
    first: Collection[Any], second: Collection[Any]
) -> Iterator[Any]:
    """Yield the values in exactly one of ``first`` and ``second``.

    Values unique to ``first`` come first, in their order, followed by the
    values unique to ``second``, in theirs.
    """
    return chain(difference(first, second), difference(second, first))


def union(first: Collection[Any], second: Collection[Any]) -> Iterator[Any]:
    """Yield every value in ``first`` or ``second``.

    All values of ``first`` come first, in their order, followed by the
    values of ``second`` that ``first`` lacks, in their order.
    """
    return chain(first, difference(second, first))