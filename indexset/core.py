"""The ordered, hash-indexed set that the public set type builds on."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any

from indexset.ranges import simplify_range, try_simplify_range
from indexset.slice import SetSlice


class BaseIndexSet:
    """A set of hashable values kept in a compact, stable order.

    Every value has an index in ``0..len(self)``.  Order is set by the
    sequence of insertions and removals, never by the hash of the values.
    Re-inserting a value that is already present leaves it where it is.
    """

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._values: list[Any] = []
        self._indices: dict[Any, int] = {}
        self.extend(iterable)

    # -- internal helpers -------------------------------------------------

    def _reindex(self, start: int = 0, stop: int | None = None) -> None:
        """Refresh the stored index of every value in ``start..stop``."""
        for position, value in enumerate(
            islice(self._values, start, stop), start
        ):
            self._indices[value] = position

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"index {index} out of bounds for length {len(self._values)}"
            )
        return index

    def _remove_at_swap(self, index: int) -> Any:
        removed = self._values[index]
        del self._indices[removed]
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._indices[last] = index
        return removed

    def _remove_at_shift(self, index: int) -> Any:
        removed = self._values.pop(index)
        del self._indices[removed]
        self._reindex(index)
        return removed

    # -- container protocol -----------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._indices

    def __getitem__(self, index: int | slice | range) -> Any:
        if isinstance(index, (slice, range)):
            span = simplify_range(index, len(self._values))
            return SetSlice(self._values[span.start:span.stop])
        return self._values[self._check_index(index)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    # -- whole-set operations ---------------------------------------------

    def copy(self) -> BaseIndexSet:
        """Return a shallow copy with the same values in the same order."""
        return type(self)(self._values)

    def clear(self) -> None:
        """Remove every value."""
        self._values.clear()
        self._indices.clear()

    def truncate(self, length: int) -> None:
        """Keep the first ``length`` values and drop the rest."""
        if length < len(self._values):
            for value in self._values[length:]:
                del self._indices[value]
            del self._values[length:]

    def drain(self, bounds: slice | range = slice(None)) -> list[Any]:
        """Remove and return the values in ``bounds``, shifting later ones down.

        Raises ``IndexError`` or ``ValueError`` if the bounds do not fit.
        """
        span = simplify_range(bounds, len(self._values))
        removed = self._values[span.start:span.stop]
        del self._values[span.start:span.stop]
        for value in removed:
            del self._indices[value]
        self._reindex(span.start)
        return removed

    def split_off(self, at: int) -> BaseIndexSet:
        """Split at ``at``: keep ``[0, at)`` and return a new set of the rest."""
        if not 0 <= at <= len(self._values):
            raise IndexError(
                f"split index {at} should be <= length {len(self._values)}"
            )
        tail = self._values[at:]
        self.truncate(at)
        return type(self)(tail)

    # -- insertion --------------------------------------------------------

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if an equal value was already present."""
        return self.insert_full(value)[1]

    def insert_full(self, value: Any) -> tuple[int, bool]:
        """Insert ``value`` and return its index and whether it was new."""
        existing = self._indices.get(value)
        if existing is not None:
            return existing, False
        index = len(self._values)
        self._values.append(value)
        self._indices[value] = index
        return index, True

    def replace(self, value: Any) -> Any:
        """Insert ``value``, replacing an equal one in place; return the old one."""
        return self.replace_full(value)[1]

    def replace_full(self, value: Any) -> tuple[int, Any]:
        """Insert or replace ``value``; return its index and the replaced value."""
        existing = self._indices.get(value)
        if existing is None:
            index = len(self._values)
            self._values.append(value)
            self._indices[value] = index
            return index, None
        old = self._values[existing]
        self._values[existing] = value
        del self._indices[old]
        self._indices[value] = existing
        return existing, old

    def extend(self, iterable: Iterable[Any]) -> None:
        """Insert every value of ``iterable`` in order."""
        for value in iterable:
            self.insert_full(value)

    def splice(
        self, bounds: slice | range, replace_with: Iterable[Any]
    ) -> list[Any]:
        """Replace the values in ``bounds`` with ``replace_with``.

        The removed values are returned.  A replacement equal to a value
        kept outside the range, or to an earlier replacement, is skipped and
        the existing value keeps its place.
        """
        span = simplify_range(bounds, len(self._values))
        removed = self._values[span.start:span.stop]
        for value in removed:
            del self._indices[value]
        kept_after = self._values[span.stop:]
        del self._values[span.start:]
        kept = set(self._indices)
        kept.update(kept_after)
        inserted: list[Any] = []
        seen: set[Any] = set()
        for value in replace_with:
            if value in kept or value in seen:
                continue
            seen.add(value)
            inserted.append(value)
        self._values.extend(inserted)
        self._values.extend(kept_after)
        self._reindex(span.start)
        return removed

    # -- lookup -----------------------------------------------------------

    def get(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or None."""
        index = self._indices.get(value)
        return None if index is None else self._values[index]

    def get_full(self, value: Any) -> tuple[int, Any] | None:
        """Return the index and stored value equal to ``value``, or None."""
        index = self._indices.get(value)
        return None if index is None else (index, self._values[index])

    def get_index_of(self, value: Any) -> int | None:
        """Return the index of ``value``, or None if it is absent."""
        return self._indices.get(value)

    # -- removal by value -------------------------------------------------

    def swap_remove(self, value: Any) -> bool:
        """Remove ``value`` by moving the last value into its place."""
        return self.swap_remove_full(value) is not None

    def shift_remove(self, value: Any) -> bool:
        """Remove ``value`` by shifting all later values down."""
        return self.shift_remove_full(value) is not None

    def swap_take(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``, swapping."""
        found = self.swap_remove_full(value)
        return None if found is None else found[1]

    def shift_take(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``, shifting."""
        found = self.shift_remove_full(value)
        return None if found is None else found[1]

    def swap_remove_full(self, value: Any) -> tuple[int, Any] | None:
        """Swap-remove ``value``; return the index it had and the stored value."""
        index = self._indices.get(value)
        if index is None:
            return None
        return index, self._remove_at_swap(index)

    def shift_remove_full(self, value: Any) -> tuple[int, Any] | None:
        """Shift-remove ``value``; return the index it had and the stored value."""
        index = self._indices.get(value)
        if index is None:
            return None
        return index, self._remove_at_shift(index)

    def pop(self) -> Any:
        """Remove and return the last value, or None if the set is empty."""
        if not self._values:
            return None
        value = self._values.pop()
        del self._indices[value]
        return value

    def retain(self, keep: Callable[[Any], bool]) -> None:
        """Keep only the values for which ``keep`` is true, in order."""
        survivors = [value for value in self._values if keep(value)]
        if len(survivors) != len(self._values):
            self._values = survivors
            self._indices = {}
            self._reindex()

    # -- positional access ------------------------------------------------

    def as_slice(self) -> SetSlice:
        """Return every value as a slice."""
        return SetSlice(self._values)

    def get_index(self, index: int) -> Any:
        """Return the value at ``index``, or None if it is out of range."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, bounds: slice | range) -> SetSlice | None:
        """Return the values in ``bounds`` as a slice, or None if they do not fit."""
        span = try_simplify_range(bounds, len(self._values))
        if span is None:
            return None
        return SetSlice(self._values[span.start:span.stop])

    def first(self) -> Any:
        """Return the first value, or None if empty."""
        return self._values[0] if self._values else None

    def last(self) -> Any:
        """Return the last value, or None if empty."""
        return self._values[-1] if self._values else None

    def swap_remove_index(self, index: int) -> Any:
        """Remove the value at ``index`` by swapping; None if out of range."""
        if not 0 <= index < len(self._values):
            return None
        return self._remove_at_swap(index)

    def shift_remove_index(self, index: int) -> Any:
        """Remove the value at ``index`` by shifting; None if out of range."""
        if not 0 <= index < len(self._values):
            return None
        return self._remove_at_shift(index)

    def move_index(self, from_index: int, to_index: int) -> None:
        """Move a value to another index, shifting the values in between."""
        from_index = self._check_index(from_index)
        to_index = self._check_index(to_index)
        value = self._values.pop(from_index)
        self._values.insert(to_index, value)
        low, high = sorted((from_index, to_index))
        self._reindex(low, high + 1)

    def swap_indices(self, a: int, b: int) -> None:
        """Swap the positions of the values at ``a`` and ``b``."""
        a = self._check_index(a)
        b = self._check_index(b)
        values = self._values
        values[a], values[b] = values[b], values[a]
        self._indices[values[a]] = a
        self._indices[values[b]] = b