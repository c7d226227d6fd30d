import pytest

from buffer_range import Range


@pytest.fixture
def text_range():
    """Build a mutable character buffer and a range over all of it."""

    def make(text):
        buffer = list(text)
        return buffer, Range.over(buffer)

    return make


@pytest.fixture
def joined():
    def join(buffer):
        return "".join(buffer)

    return join
