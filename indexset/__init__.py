"""A hash set with stable, index-addressable order, plus its slices, range and set-operation helpers."""

__version__ = "0.1.0"