# charclass.py
# Character tests and case maps with C-locale (ASCII) semantics.
# Elements may be one-character strings or integer code units (bytes), so the
# same predicates work over list(text) and bytearray buffers alike.
from __future__ import annotations

from typing import Callable, Union

from buffer_range import Position

Element = Union[str, int]

# space, \t, \n, \v, \f, \r
WHITESPACE_CODES = frozenset((32, 9, 10, 11, 12, 13))

_CASE_OFFSET = 32


def _code(el: Element) -> int:
    if isinstance(el, str):
        return ord(el)
    return el


def _same_kind(original: Element, code: int) -> Element:
    if isinstance(original, str):
        return chr(code)
    return code


def is_digit(el: Element) -> bool:
    return 48 <= _code(el) <= 57


def is_upper(el: Element) -> bool:
    return 65 <= _code(el) <= 90


def is_lower(el: Element) -> bool:
    return 97 <= _code(el) <= 122


def is_alpha(el: Element) -> bool:
    return is_upper(el) or is_lower(el)


def is_alnum(el: Element) -> bool:
    o = _code(el)
    return (48 <= o <= 57) or (65 <= o <= 90) or (97 <= o <= 122)


def is_punct(el: Element) -> bool:
    # printable, not space, not alnum
    o = _code(el)
    return 33 <= o <= 126 and not is_alnum(el)


def is_space(el: Element) -> bool:
    return _code(el) in WHITESPACE_CODES


def negate(predicate: Callable[[Element], bool]) -> Callable[[Element], bool]:
    def inverted(el: Element) -> bool:
        return not predicate(el)

    return inverted


def to_upper(el: Element) -> Element:
    if is_lower(el):
        return _same_kind(el, _code(el) - _CASE_OFFSET)
    return el


def to_lower(el: Element) -> Element:
    if is_upper(el):
        return _same_kind(el, _code(el) + _CASE_OFFSET)
    return el


def upcase(pos: Position) -> None:
    pos.set(to_upper(pos.get()))


def downcase(pos: Position) -> None:
    pos.set(to_lower(pos.get()))
