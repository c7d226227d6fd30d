# tokenizer.py
from __future__ import annotations

from typing import Iterator, List

from bs4 import BeautifulSoup

from algorithms import Predicate, find_if, for_each
from buffer_range import Range
from charclass import Element, downcase, is_alnum, is_space, negate


def iter_words(rng: Range[Element], is_delimiter: Predicate[Element] = is_space) -> Iterator[Range[Element]]:
    # each word is the run between a non-delimiter and the next delimiter
    is_word = negate(is_delimiter)
    rest = rng
    while not rest.empty():
        start = find_if(rest, is_word)
        stop = find_if(rest.sub(start, rest.end), is_delimiter)
        if start != stop:
            yield rest.sub(start, stop)
        rest = rest.sub(stop, rest.end)


def tokenize_text_stream(text: str) -> Iterator[str]:
    buffer: List[str] = list(text)
    for word in iter_words(Range.over(buffer), negate(is_alnum)):
        for_each(word, downcase)
        yield "".join(word.values())


def html_text(markup: str) -> str:
    # visible text only; tags become spaces so words don't fuse
    soup = BeautifulSoup(markup, "lxml")
    return soup.get_text(separator=" ")


def tokenize_html(markup: str) -> Iterator[str]:
    return tokenize_text_stream(html_text(markup))
