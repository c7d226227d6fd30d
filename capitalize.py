# capitalize.py
from __future__ import annotations

import logging

from algorithms import Predicate, find, find_if, for_each
from buffer_range import Range
from charclass import Element, is_space, upcase

logger = logging.getLogger(__name__)


def capitalize(rng: Range[Element]) -> None:
    for_each(rng, upcase)


def capitalize_word(
    rng: Range[Element], marker: Element, boundary: Predicate[Element] = is_space
) -> Range[Element]:
    """
    Upper-case the word that starts at the first ``marker`` in ``rng``.

    The word runs up to the next element matching ``boundary`` (whitespace by
    default) or to the end of ``rng``. A missing marker is not an error: the
    search yields ``rng.end``, the word is empty and nothing changes.

    The returned sub-range is informational only: it is the word that was
    capitalized, empty when the marker does not occur.
    """
    start = find(rng, marker)
    if start == rng.end:
        logger.debug(f"marker {marker!r} not found in {rng!r}, nothing to capitalize")
    tail = rng.sub(start, rng.end)
    word = rng.sub(start, find_if(tail, boundary))
    capitalize(word)
    return word
