# demo.py
"""
Command-line walkthrough of slicing a buffer with ranges.

Runs the searches and transforms over a piece of text and prints a short
report, followed by the same algorithms applied to a buffer of integers.
"""
from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional, Sequence

from algorithms import find, find_if, for_each
from buffer_range import Position, Range
from capitalize import capitalize_word
from charclass import is_digit, is_punct, is_upper
from range_errors import RangeError
from tokenizer import html_text, tokenize_text_stream

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "foo bar\tspam eggs"
DEFAULT_MARKER = "b"
ABSENT_PROBE = "z"
LOG_LEVEL_ENV = "CHARSLICE_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _describe(rng: Range[str], pos: Position[str]) -> str:
    if pos == rng.end:
        return "none"
    return f"{pos.get()!r} at {pos.index}"


def build_report(text: str, marker: str) -> List[str]:
    buffer = list(text)
    whole = Range.over(buffer)
    lines = [f"Text: {text!r}"]

    found = find(whole, ABSENT_PROBE) != whole.end
    lines.append(f"1. {ABSENT_PROBE!r} {'found' if found else 'not found'}")

    lines.append(f"2. First digit: {_describe(whole, find_if(whole, is_digit))}")
    lines.append(f"   First upper case: {_describe(whole, find_if(whole, is_upper))}")
    lines.append(f"   First punctuation: {_describe(whole, find_if(whole, is_punct))}")

    word = capitalize_word(whole, marker)
    logger.debug(f"capitalized {word!r} for marker {marker!r}")
    lines.append(f"3. After capitalize_word({marker!r}): {''.join(buffer)!r}")

    numbers = list(range(6))
    window = Range.of(numbers, 2, 5)
    total = 0

    def accumulate(pos: Position[int]) -> None:
        nonlocal total
        total += pos.get()

    for_each(window, accumulate)
    lines.append(f"4. Sum of {window.values()} sliced from {numbers}: {total}")

    tokens = list(tokenize_text_stream(text))
    lines.append(f"5. Tokens: {', '.join(tokens) if tokens else 'none'}")
    return lines


def print_report(lines: Sequence[str]) -> None:
    print("\n" + "=" * 30)
    print("SLICING REPORT")
    print("=" * 30)
    for line in lines:
        print(line)
    print("=" * 30 + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the slicing walkthrough."""
    parser = argparse.ArgumentParser(description="Range slicing walkthrough")
    parser.add_argument("--text", default=DEFAULT_TEXT, help="Text to scan and transform")
    parser.add_argument("--marker", default=DEFAULT_MARKER, help="First character of the word to capitalize")
    parser.add_argument("--html", action="store_true", help="Treat --text as HTML and scan its visible text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)
    if len(args.marker) != 1:
        parser.error("--marker must be a single character")

    configure_logging(args.verbose)

    text = html_text(args.text) if args.html else args.text
    try:
        lines = build_report(text, args.marker)
    except RangeError as e:
        logger.error(f"Range misuse while building report: {e}")
        return 1

    print_report(lines)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
