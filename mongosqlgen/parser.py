"""Low-level text helpers used to pick apart SQL statements."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

__all__ = [
    "QueryError",
    "parse_user_input",
    "find_after",
    "find_between",
    "contains_command",
    "split_input_by_delimiters",
    "count_occurrences",
]


class QueryError(ValueError):
    """Raised when a statement cannot be parsed or converted."""


def parse_user_input(text: str) -> list[str]:
    """Split *text* on spaces into tokens; at least two tokens are required."""
    tokens = [token for token in text.split(" ") if token]
    if len(tokens) < 2:
        raise QueryError(f"invalid input: {text}")
    return tokens


def _end_of_first(text: str, s: str) -> int:
    """Index of the last character of the first *s* in *text*, offset as the lookup rules define."""
    index = text.find(s) + len(s) - 1
    if index == -1:
        raise QueryError(f"could not find: {s}")
    return index


def find_after(text: str, s: str) -> str:
    """Return the part of *text* that follows the first occurrence of *s*."""
    start = _end_of_first(text, s) + 1
    if start > len(text):
        raise QueryError(f"could not find: {s}")
    return text[start:]


def find_between(text: str, start: str, end: str) -> str:
    """Return the part of *text* between the first *start* and the first *end*."""
    try:
        begin = _end_of_first(text, start) + 1
    except QueryError:
        raise QueryError(f"could not find start: {start}") from None
    finish = text.find(end)
    if finish == -1:
        raise QueryError(f"could not find end: {end}")
    if begin > finish:
        raise QueryError(f"{start!r} does not come before {end!r}")
    return text[begin:finish]


def contains_command(text: str, s: str) -> bool:
    """Tell whether *s* is one of the space-separated words of *text*."""
    return s in text.split(" ")


def split_input_by_delimiters(text: str, delimiters: Iterable[str]) -> list[str]:
    """Split *text* at any character that equals one of *delimiters*.

    Only single-character delimiters take effect; empty pieces are dropped
    and at least one piece must remain.
    """
    delimiter_set = set(delimiters)
    tokens = [
        "".join(chars)
        for is_delimiter, chars in groupby(text, key=lambda ch: ch in delimiter_set)
        if not is_delimiter
    ]
    if not tokens:
        raise QueryError(f"invalid input: {text}")
    return tokens


def count_occurrences(text: str, s: str) -> int:
    """Count the characters of *text* equal to *s*."""
    return sum(1 for ch in text if ch == s)