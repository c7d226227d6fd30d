# algorithms.py
"""
Search and traversal over a Range.

Every algorithm here is a single forward pass with no allocation beyond the
position handles it yields. Searches report "not found" by returning the
range's own end, so results can always be used as a sub-range bound.
"""
from __future__ import annotations

from typing import Protocol, TypeVar

from buffer_range import Position, Range

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Predicate(Protocol[T_contra]):
    """Pure element test; must give the same answer for the same element."""

    def __call__(self, element: T_contra) -> bool: ...


class Action(Protocol[T]):
    """Visits one position; may write the element through ``position.set``."""

    def __call__(self, position: Position[T]) -> None: ...


def find_if(rng: Range[T], predicate: Predicate[T]) -> Position[T]:
    rng.check()
    for pos in rng.positions():
        if predicate(pos.get()):
            return pos
    return rng.end


def find(rng: Range[T], value: T) -> Position[T]:
    return find_if(rng, lambda element: element == value)


def for_each(rng: Range[T], action: Action[T]) -> None:
    rng.check()
    for pos in rng.positions():
        action(pos)
