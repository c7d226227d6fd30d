# range_errors.py
from __future__ import annotations


class RangeError(Exception):
    """
    Base class for misuse of positions and ranges.

    These are programmer errors: a position stepped outside its buffer, a
    sub-range escaping its parent, or a view outliving the elements it
    addresses. "Not found" is never one of these; searches return the
    range's end instead.
    """


class BoundsError(RangeError, IndexError):
    """Position or range bounds fall outside the buffer or parent range."""


class ForeignPositionError(RangeError, ValueError):
    """Positions from two different buffers were combined."""


class DanglingRangeError(RangeError):
    """The buffer shrank underneath a position or range that still views it."""


class BufferResizedError(RangeError):
    """Elements were added to or removed from a buffer while it was being traversed."""
