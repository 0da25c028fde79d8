"""The public ordered set type, with comparisons, set algebra and sorting."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import Any

from indexset import setops
from indexset.core import BaseIndexSet


class IndexSet(BaseIndexSet):
    """A hash set whose iteration order is independent of the values' hashes.

    Equality ignores order: two sets are equal when they hold the same
    values.  Set algebra yields values in a concatenated, documented order.
    """

    __hash__ = None  # type: ignore[assignment]

    # -- comparison -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseIndexSet):
            return NotImplemented
        return len(self) == len(other) and self.is_subset(other)

    def is_disjoint(self, other: BaseIndexSet) -> bool:
        """Return True if ``self`` and ``other`` share no values."""
        if len(self) <= len(other):
            return all(value not in other for value in self)
        return all(value not in self for value in other)

    def is_subset(self, other: BaseIndexSet) -> bool:
        """Return True if every value of ``self`` is in ``other``."""
        return len(self) <= len(other) and all(value in other for value in self)

    def is_superset(self, other: BaseIndexSet) -> bool:
        """Return True if every value of ``other`` is in ``self``."""
        return len(other) <= len(self) and all(value in self for value in other)

    # -- lazy set algebra -------------------------------------------------

    def difference(self, other: BaseIndexSet) -> Iterator[Any]:
        """Yield values in ``self`` but not ``other``, in ``self``'s order."""
        return setops.difference(self, other)

    def symmetric_difference(self, other: BaseIndexSet) -> Iterator[Any]:
        """Yield values in exactly one set: ``self``'s first, then ``other``'s."""
        return setops.symmetric_difference(self, other)

    def intersection(self, other: BaseIndexSet) -> Iterator[Any]:
        """Yield values in both sets, in ``self``'s order."""
        return setops.intersection(self, other)

    def union(self, other: BaseIndexSet) -> Iterator[Any]:
        """Yield all of ``self``, then the values unique to ``other``."""
        return setops.union(self, other)

    # -- operators --------------------------------------------------------

    def __and__(self, other: object) -> IndexSet:
        if not isinstance(other, BaseIndexSet):
            return NotImplemented
        return type(self)(self.intersection(other))

    def __or__(self, other: object) -> IndexSet:
        if not isinstance(other, BaseIndexSet):
            return NotImplemented
        return type(self)(self.union(other))

    def __xor__(self, other: object) -> IndexSet:
        if not isinstance(other, BaseIndexSet):
            return NotImplemented
        return type(self)(self.symmetric_difference(other))

    def __sub__(self, other: object) -> IndexSet:
        if not isinstance(other, BaseIndexSet):
            return NotImplemented
        return type(self)(self.difference(other))

    # -- ordering ---------------------------------------------------------

    def sort(
        self, key: Callable[[Any], Any] | None = None, reverse: bool = False
    ) -> None:
        """Sort the values in place, stably, by their natural order or ``key``."""
        self._values.sort(key=key, reverse=reverse)
        self._reindex()

    def sort_by(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort in place, stably, with a comparator returning <0, 0 or >0."""
        self._values.sort(key=functools.cmp_to_key(cmp))
        self._reindex()

    def sorted_by(self, cmp: Callable[[Any, Any], int]) -> Iterator[Any]:
        """Return an iterator over the values sorted stably by ``cmp``."""
        return iter(sorted(self._values, key=functools.cmp_to_key(cmp)))

    def sort_by_cached_key(self, sort_key: Callable[[Any], Any]) -> None:
        """Sort in place, stably, calling ``sort_key`` once per value."""
        self._values.sort(key=sort_key)
        self._reindex()

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._values.reverse()
        self._reindex()

    # -- searching --------------------------------------------------------

    def binary_search(self, x: Any) -> tuple[bool, int]:
        """Search a sorted set for ``x``; see :meth:`SetSlice.binary_search`."""
        return self.as_slice().binary_search(x)

    def binary_search_by(self, f: Callable[[Any], int]) -> tuple[bool, int]:
        """Search a sorted set with a comparator against the target."""
        return self.as_slice().binary_search_by(f)

    def binary_search_by_key(
        self, b: Any, f: Callable[[Any], Any]
    ) -> tuple[bool, int]:
        """Search a sorted set for the key ``b`` among ``f(value)``."""
        return self.as_slice().binary_search_by_key(b, f)

    def partition_point(self, pred: Callable[[Any], bool]) -> int:
        """Return the index of the first value for which ``pred`` is false."""
        return self.as_slice().partition_point(pred)