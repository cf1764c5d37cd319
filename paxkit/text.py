"""Newline handling, Luhn sums and splitting of text into parts."""

from __future__ import annotations

from typing import Any, Iterator, Sequence, TypeVar

from .sequences import (
    first,
    not_first,
    not_last,
    split_at,
    split_by,
    split_by_sub,
    subview,
)

S = TypeVar("S", bound=Sequence)

LF = 0x0A
CR = 0x0D

_NEWLINES = "\n\r\n"
_TWICE = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


class _Newline:
    """Marker for splitting at any newline: LF, CR, LF+CR or CR+LF."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NEWLINE"


NEWLINE = _Newline()


def _code(char: Any) -> int:
    if isinstance(char, int):
        return char
    if isinstance(char, (str, bytes)) and len(char) == 1:
        return ord(char)
    return -1


def is_newline(char: Any) -> bool:
    """True iff char is a line feed or a carriage return (as a character or a code)."""
    return _code(char) in (LF, CR)


def newline_length(char: Any, next_char: Any = None) -> int:
    """2 for LF+CR or CR+LF, 1 if char alone is a newline, otherwise 0."""
    if not is_newline(char):
        return 0
    if next_char is not None and _code(char) ^ _code(next_char) == LF ^ CR:
        return 2
    return 1


def find_newline(text: Sequence) -> int:
    """Index of the first LF or CR in text, or len(text) if there is none."""
    return next((i for i, c in enumerate(text) if is_newline(c)), len(text))


def starts_with_newline(text: Sequence) -> int:
    """Length (0, 1 or 2) of the newline that text starts with."""
    if len(text) > 1:
        return newline_length(text[0], text[1])
    if text:
        return int(is_newline(text[0]))
    return 0


def ends_with_newline(text: Sequence) -> int:
    """Length (0, 1 or 2) of the newline that text ends with."""
    if len(text) > 1:
        return newline_length(text[-1], text[-2])
    if text:
        return int(is_newline(text[0]))
    return 0


def trim_first_newline(text: S) -> S:
    """text without one leading newline, if it has one."""
    return not_first(text, starts_with_newline(text))


def trim_last_newline(text: S) -> S:
    """text without one trailing newline, if it has one."""
    return not_last(text, ends_with_newline(text))


def split_by_newline(text: S) -> tuple[S, S]:
    """The parts before and after the first newline, not including it."""
    where = find_newline(text)
    return split_at(text, where, starts_with_newline(not_first(text, where)))


def identify_newline(text: Sequence) -> str:
    """The first newline used in text ('\\n', '\\r', '\\n\\r' or '\\r\\n'); '\\n' if there is none."""
    rest = not_first(text, find_newline(text))
    size = starts_with_newline(rest)
    if size:
        return subview(_NEWLINES, int(_code(rest[0]) == CR), size)
    return first(_NEWLINES, 1)


def luhn_sum(digits: str) -> int:
    """The Luhn control sum of a string of decimal digits, doubling from the first digit."""
    total = 0
    for i, c in enumerate(digits):
        if not ("0" <= c <= "9" and len(c) == 1):
            raise ValueError(f"not a decimal digit: {c!r}")
        value = ord(c) - ord("0")
        total += _TWICE[value] if i % 2 == 0 else value
    return total


def _split_once(text: S, divider: Any) -> tuple[S, S]:
    if divider is NEWLINE:
        return split_by_newline(text)
    if isinstance(text, (str, bytes)) and isinstance(divider, type(text)):
        return split_by_sub(text, divider)
    if isinstance(divider, (list, tuple)):
        return split_by_sub(text, divider)
    return split_by(text, divider)


def split_all(text: S, divider: Any = NEWLINE) -> Iterator[S]:
    """Yield the parts of text between dividers.

    divider is NEWLINE (any newline), a substring, or a single item. A trailing
    empty part is not yielded; an empty text yields nothing.
    """
    while True:
        part, rest = _split_once(text, divider)
        if len(rest) == len(text):
            return
        yield part
        text = rest