# buffer_range.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, MutableSequence, Optional, TypeVar

from range_errors import BoundsError, BufferResizedError, DanglingRangeError, ForeignPositionError

T = TypeVar("T")


class Position(Generic[T]):
    """
    A checked location inside one caller-owned buffer.

    Valid indices run from 0 up to and including ``len(buffer)``; the last
    one is the one-past-end position, which can be held, compared and used
    as a range bound but never read or written. Arithmetic that would step
    outside that interval raises ``BoundsError``.
    """

    __slots__ = ("_buffer", "_index")

    def __init__(self, buffer: MutableSequence[T], index: int):
        size = len(buffer)
        if not 0 <= index <= size:
            raise BoundsError(f"position {index} outside buffer of length {size}")
        self._buffer = buffer
        self._index = index

    @property
    def buffer(self) -> MutableSequence[T]:
        return self._buffer

    @property
    def index(self) -> int:
        return self._index

    def _require_same_buffer(self, other: Position) -> None:
        if other._buffer is not self._buffer:
            raise ForeignPositionError("positions belong to different buffers")

    def _require_live(self) -> None:
        size = len(self._buffer)
        if self._index > size:
            raise DanglingRangeError(
                f"position {self._index} outlived its buffer (now length {size})"
            )
        if self._index == size:
            raise BoundsError("cannot dereference the one-past-end position")

    def get(self) -> T:
        self._require_live()
        return self._buffer[self._index]

    def set(self, value: T) -> None:
        self._require_live()
        self._buffer[self._index] = value

    def next(self) -> Position[T]:
        return self + 1

    def prev(self) -> Position[T]:
        return self - 1

    def __add__(self, offset: int) -> Position[T]:
        if not isinstance(offset, int):
            return NotImplemented
        return Position(self._buffer, self._index + offset)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Position):
            self._require_same_buffer(other)
            return self._index - other._index
        if isinstance(other, int):
            return Position(self._buffer, self._index - other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return other._buffer is self._buffer and other._index == self._index

    def __hash__(self) -> int:
        return hash((id(self._buffer), self._index))

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._require_same_buffer(other)
        return self._index < other._index

    def __le__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._require_same_buffer(other)
        return self._index <= other._index

    def __gt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._require_same_buffer(other)
        return self._index > other._index

    def __ge__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._require_same_buffer(other)
        return self._index >= other._index

    def __repr__(self) -> str:
        return f"Position({self._index})"


@dataclass(frozen=True)
class Range(Generic[T]):
    """
    Half-open view ``[begin, end)`` over a buffer the caller owns.

    The range never copies or resizes the buffer. ``end`` is never visited
    and is what searches return when nothing matches. Narrowing always
    builds a new Range.
    """

    begin: Position[T]
    end: Position[T]

    def __post_init__(self) -> None:
        if self.begin.buffer is not self.end.buffer:
            raise ForeignPositionError("range bounds belong to different buffers")
        if self.begin.index > self.end.index:
            raise BoundsError(
                f"range begin ({self.begin.index}) must be <= end ({self.end.index})"
            )

    @classmethod
    def over(cls, buffer: MutableSequence[T]) -> Range[T]:
        return cls(Position(buffer, 0), Position(buffer, len(buffer)))

    @classmethod
    def of(cls, buffer: MutableSequence[T], start: int = 0, stop: Optional[int] = None) -> Range[T]:
        if stop is None:
            stop = len(buffer)
        return cls(Position(buffer, start), Position(buffer, stop))

    @property
    def buffer(self) -> MutableSequence[T]:
        return self.begin.buffer

    def empty(self) -> bool:
        return self.begin == self.end

    def size(self) -> int:
        return self.end - self.begin

    def __len__(self) -> int:
        return self.size()

    def check(self) -> None:
        size = len(self.buffer)
        if self.end.index > size:
            raise DanglingRangeError(
                f"range [{self.begin.index}, {self.end.index}) outlived its buffer "
                f"(now length {size})"
            )

    def sub(self, first: Position[T], last: Position[T]) -> Range[T]:
        """Return the narrower range ``[first, last)``; both must lie within this one."""
        for pos in (first, last):
            if pos.buffer is not self.buffer:
                raise ForeignPositionError("sub-range bounds belong to a different buffer")
        if not self.begin.index <= first.index <= last.index <= self.end.index:
            raise BoundsError(
                f"sub-range [{first.index}, {last.index}) does not fit in "
                f"[{self.begin.index}, {self.end.index})"
            )
        return Range(first, last)

    def positions(self) -> Iterator[Position[T]]:
        buffer = self.buffer
        size = len(buffer)

        def require_fixed_size() -> None:
            self.check()
            if len(buffer) != size:
                raise BufferResizedError(
                    f"buffer length changed from {size} to {len(buffer)} during traversal"
                )

        for index in range(self.begin.index, self.end.index):
            require_fixed_size()
            yield Position(buffer, index)
        # catches a resize made while visiting the last position
        require_fixed_size()

    __iter__ = positions

    def values(self) -> List[T]:
        self.check()
        return [self.buffer[i] for i in range(self.begin.index, self.end.index)]

    def __repr__(self) -> str:
        return f"Range({self.begin.index}, {self.end.index})"
