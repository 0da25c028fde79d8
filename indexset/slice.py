"""An ordered, immutable view of the values held by an index set."""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from indexset.ranges import simplify_range, try_simplify_range


@functools.total_ordering
class SetSlice:
    """A run of values from an index set, supporting indexed access only.

    Unlike the set itself, a slice compares by order: equality, ordering
    and hashing all follow the sequence of values.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = tuple(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._values)

    def __getitem__(self, index: int | slice | range) -> Any:
        if isinstance(index, (slice, range)):
            span = simplify_range(index, len(self._values))
            return SetSlice(self._values[span.start:span.stop])
        return self._values[operator.index(index)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetSlice):
            return NotImplemented
        return self._values == other._values

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SetSlice):
            return NotImplemented
        return self._values < other._values

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SetSlice):
            return NotImplemented
        return self._values <= other._values

    def __hash__(self) -> int:
        return hash((len(self._values), self._values))

    def __repr__(self) -> str:
        return f"SetSlice({list(self._values)!r})"

    def get_index(self, index: int) -> Any:
        """Return the value at ``index``, or None if it is out of range."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, bounds: slice | range) -> SetSlice | None:
        """Return the sub-slice for ``bounds``, or None if they do not fit."""
        span = try_simplify_range(bounds, len(self._values))
        if span is None:
            return None
        return SetSlice(self._values[span.start:span.stop])

    def first(self) -> Any:
        """Return the first value, or None if the slice is empty."""
        return self._values[0] if self._values else None

    def last(self) -> Any:
        """Return the last value, or None if the slice is empty."""
        return self._values[-1] if self._values else None

    def split_at(self, index: int) -> tuple[SetSlice, SetSlice]:
        """Divide the slice in two at ``index``; raise IndexError past the end."""
        if not 0 <= index <= len(self._values):
            raise IndexError(
                f"split index {index} should be <= length {len(self._values)}"
            )
        return SetSlice(self._values[:index]), SetSlice(self._values[index:])

    def split_first(self) -> tuple[Any, SetSlice] | None:
        """Return the first value and the rest, or None if empty."""
        if not self._values:
            return None
        return self._values[0], SetSlice(self._values[1:])

    def split_last(self) -> tuple[Any, SetSlice] | None:
        """Return the last value and the rest, or None if empty."""
        if not self._values:
            return None
        return self._values[-1], SetSlice(self._values[:-1])

    def binary_search(self, x: Any) -> tuple[bool, int]:
        """Search a sorted slice for ``x``.

        Return ``(True, index)`` if found, else ``(False, index)`` where
        ``index`` is the position at which ``x`` would keep the order.
        """
        return self.binary_search_by(lambda value: (value > x) - (value < x))

    def binary_search_by(self, f: Callable[[Any], int]) -> tuple[bool, int]:
        """Search with a comparator returning <0, 0 or >0 against the target."""
        low, high = 0, len(self._values)
        while low < high:
            middle = (low + high) // 2
            order = f(self._values[middle])
            if order < 0:
                low = middle + 1
            elif order > 0:
                high = middle
            else:
                return True, middle
        return False, low

    def binary_search_by_key(
        self, b: Any, f: Callable[[Any], Any]
    ) -> tuple[bool, int]:
        """Search for the key ``b`` among ``f(value)`` for each value."""

        def compare(value: Any) -> int:
            key = f(value)
            return (key > b) - (key < b)

        return self.binary_search_by(compare)

    def partition_point(self, pred: Callable[[Any], bool]) -> int:
        """Return the index of the first value for which ``pred`` is false."""
        low, high = 0, len(self._values)
        while low < high:
            middle = (low + high) // 2
            if pred(self._values[middle]):
                low = middle + 1
            else:
                high = middle
        return low