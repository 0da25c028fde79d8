"""Resolution of index bounds against a sequence length.

Bounds are given as a ``slice`` or a ``range`` with a step of one.  A missing
start means "from the beginning" and a missing stop means "to the end".
"""

from __future__ import annotations

import operator


def _endpoints(bounds: slice | range, length: int) -> tuple[int, int]:
    """Return the raw start and end of ``bounds``, filling in open ends."""
    if not isinstance(bounds, (slice, range)):
        raise TypeError(
            f"bounds must be a slice or a range, not {type(bounds).__name__}"
        )
    step = bounds.step
    if step is not None and operator.index(step) != 1:
        raise ValueError(f"bounds must have a step of 1, not {step}")
    start = 0 if bounds.start is None else operator.index(bounds.start)
    end = length if bounds.stop is None else operator.index(bounds.stop)
    return start, end


def _problem(start: int, end: int, length: int) -> Exception | None:
    """Describe why ``start..end`` does not fit in ``length``, if it does not."""
    if not 0 <= start <= length:
        return IndexError(f"range start {start} should be <= length {length}")
    if not 0 <= end <= length:
        return IndexError(f"range end {end} should be <= length {length}")
    if start > end:
        return ValueError(f"range start {start} should be <= range end {end}")
    return None


def simplify_range(bounds: slice | range, length: int) -> range:
    """Resolve ``bounds`` to a concrete ``range`` within ``0..length``.

    Raises ``IndexError`` if an end lies outside the sequence and
    ``ValueError`` if the start lies after the end.
    """
    start, end = _endpoints(bounds, length)
    problem = _problem(start, end, length)
    if problem is not None:
        raise problem
    return range(start, end)


def try_simplify_range(bounds: slice | range, length: int) -> range | None:
    """Resolve ``bounds`` like :func:`simplify_range`, returning None if invalid."""
    start, end = _endpoints(bounds, length)
    if _problem(start, end, length) is not None:
        return None
    return range(start, end)