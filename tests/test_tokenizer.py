import pytest

from algorithms import for_each
from buffer_range import Range
from charclass import is_punct, upcase
from tokenizer import html_text, iter_words, tokenize_html, tokenize_text_stream


def words_of(text, **kwargs):
    return ["".join(word.values()) for word in iter_words(Range.over(list(text)), **kwargs)]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("  foo bar\tspam ", ["foo", "bar", "spam"]),
        ("foo", ["foo"]),
        ("", []),
        (" \t\n ", []),
        ("a\v\fb", ["a", "b"]),
    ],
)
def test_iter_words(text, expected):
    assert words_of(text) == expected


def test_iter_words_custom_delimiter():
    assert words_of("one,two;;three", is_delimiter=is_punct) == ["one", "two", "three"]


def test_words_are_views(joined):
    buffer = list("foo bar")
    for word in iter_words(Range.over(buffer)):
        if word.values()[0] == "b":
            for_each(word, upcase)
    assert joined(buffer) == "foo BAR"


def test_iter_words_over_bytes():
    data = bytearray(b"ab cd")
    words = [bytes(word.values()) for word in iter_words(Range.over(data))]
    assert words == [b"ab", b"cd"]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello, World 42!", ["hello", "world", "42"]),
        ("Café au lait", ["caf", "au", "lait"]),
        ("ALL_CAPS-and-dashes", ["all", "caps", "and", "dashes"]),
        ("...", []),
        ("", []),
    ],
)
def test_tokenize_text_stream(text, expected):
    assert list(tokenize_text_stream(text)) == expected


def test_tokenize_text_stream_is_lazy():
    tokens = tokenize_text_stream("first second")
    assert next(tokens) == "first"


def test_html_text_separates_elements():
    assert html_text("<p>foo bar</p>").strip() == "foo bar"
    assert html_text("<p>Hello</p><p>World</p>").split() == ["Hello", "World"]


def test_tokenize_html():
    markup = "<html><body><h1>Range Slicing</h1><p>Find <b>the</b> first 1.</p></body></html>"
    assert list(tokenize_html(markup)) == ["range", "slicing", "find", "the", "first", "1"]
