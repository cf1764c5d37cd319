"""Slicing, searching, trimming and splitting of sequences.

Sizes and offsets never fail: a count larger than the sequence is clamped to it,
and a failed search returns the length of the sequence rather than raising.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

S = TypeVar("S", bound=Sequence)

Predicate = Callable[[Any], Any]


def _clamped_offset(offset: int, size: int) -> int:
    """Offset into a sequence of size; a negative offset counts from the back."""
    if offset >= 0:
        return min(offset, size)
    if -offset < size:
        return size + offset
    return 0


def first(seq: S, n: int = 1) -> S:
    """The first n items (all of seq if it is shorter)."""
    return seq[: min(n, len(seq))]


def last(seq: S, n: int = 1) -> S:
    """The last n items (all of seq if it is shorter)."""
    return seq[len(seq) - n:] if n < len(seq) else seq[:]


def not_first(seq: S, n: int = 1) -> S:
    """All items but the first n (empty if seq is not longer than n)."""
    return seq[n:] if n < len(seq) else seq[len(seq):]


def not_last(seq: S, n: int = 1) -> S:
    """All items but the last n (empty if seq is not longer than n)."""
    return seq[: len(seq) - n] if n < len(seq) else seq[:0]


def subview(seq: S, offset: int, size: int) -> S:
    """Up to size items starting at offset; a negative offset counts from the back."""
    start = _clamped_offset(offset, len(seq))
    return seq[start: start + min(len(seq) - start, size)]


def find(seq: Sequence, item: Any) -> int:
    """Index of the first occurrence of item, or len(seq) if there is none."""
    try:
        return seq.index(item)
    except ValueError:
        return len(seq)


def find_sub(seq: Sequence, sub: Sequence) -> int:
    """Index where sub first occurs in seq, or len(seq) if it does not; an empty sub is found at 0."""
    if isinstance(seq, (str, bytes)) and isinstance(sub, type(seq)):
        where = seq.find(sub)
        return len(seq) if where < 0 else where
    width = len(sub)
    target = list(sub)
    return next(
        (i for i in range(len(seq) - width + 1) if list(seq[i: i + width]) == target),
        len(seq),
    )


def find_if(seq: Sequence, pred: Predicate) -> int:
    """Index of the first item satisfying pred, or len(seq) if there is none."""
    return next((i for i, value in enumerate(seq) if pred(value)), len(seq))


def rfind(seq: Sequence, item: Any) -> int:
    """Index of the last occurrence of item, or len(seq) if there is none."""
    return rfind_if(seq, lambda value: value == item)


def rfind_if(seq: Sequence, pred: Predicate) -> int:
    """Index of the last item satisfying pred, or len(seq) if there is none."""
    end = len(seq) - 1
    return next(
        (end - i for i, value in enumerate(reversed(seq)) if pred(value)),
        len(seq),
    )


def contains(seq: Sequence, item: Any) -> bool:
    """True iff item is found in seq."""
    return find(seq, item) < len(seq)


def until(seq: S, item: Any) -> S:
    """The items before the first occurrence of item (all of seq if there is none)."""
    return seq[: find(seq, item)]


def starts_with(seq: Sequence, prefix: Sequence) -> int:
    """len(prefix) if seq begins with prefix, otherwise 0."""
    return len(prefix) if list(first(seq, len(prefix))) == list(prefix) else 0


def ends_with(seq: Sequence, suffix: Sequence) -> int:
    """len(suffix) if seq ends with suffix, otherwise 0."""
    return len(suffix) if list(last(seq, len(suffix))) == list(suffix) else 0


def starts_with_item(seq: Sequence, item: Any) -> int:
    """1 if the first item of seq is item, otherwise 0."""
    return int(bool(seq) and seq[0] == item)


def ends_with_item(seq: Sequence, item: Any) -> int:
    """1 if the last item of seq is item, otherwise 0."""
    return int(bool(seq) and seq[-1] == item)


def trim_front(seq: S, item: Any) -> S:
    """seq without one leading item, if it starts with it."""
    return not_first(seq, starts_with_item(seq, item))


def trim_back(seq: S, item: Any) -> S:
    """seq without one trailing item, if it ends with it."""
    return not_last(seq, ends_with_item(seq, item))


def _matcher(item: Any) -> Predicate:
    if callable(item):
        return item
    return lambda value: value == item


def trim_first(seq: S, item: Any) -> S:
    """seq without all leading items equal to item (or satisfying item, if it is callable)."""
    return seq[find_if(seq, lambda value, match=_matcher(item): not match(value)):]


def trim_last(seq: S, item: Any) -> S:
    """seq without all trailing items equal to item (or satisfying item, if it is callable)."""
    match = _matcher(item)
    keep = rfind_if(seq, lambda value: not match(value))
    return seq[: keep + 1] if keep < len(seq) else seq[:0]


def trim(seq: S, item: Any) -> S:
    """seq without leading and trailing items equal to (or satisfying) item."""
    return trim_last(trim_first(seq, item), item)


def _check_equal_length(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError(f"sequences must have the same length ({len(a)} != {len(b)})")


def on_each_pair(a: Sequence, b: Sequence, func: Callable[[Any, Any], Any]) -> None:
    """Call func(x, y) for each pair of items; a and b must have the same length."""
    _check_equal_length(a, b)
    for x, y in zip(a, b):
        func(x, y)


def on_each_pair_while(a: Sequence, b: Sequence, func: Callable[[Any, Any], Any]) -> bool:
    """Call func(x, y) on pairs while it returns true; True iff all pairs were visited."""
    _check_equal_length(a, b)
    return all(func(x, y) for x, y in zip(a, b))


def all_pairs(a: Sequence, b: Sequence, func: Callable[[Any, Any], Any]) -> bool:
    """True iff func(a[i], b[i]) holds for every i."""
    return on_each_pair_while(a, b, lambda x, y: bool(func(x, y)))


def any_pairs(a: Sequence, b: Sequence, func: Callable[[Any, Any], Any]) -> bool:
    """True iff func(a[i], b[i]) holds for some i."""
    return not on_each_pair_while(a, b, lambda x, y: not func(x, y))


def no_pairs(a: Sequence, b: Sequence, func: Callable[[Any, Any], Any]) -> bool:
    """True iff func(a[i], b[i]) holds for no i."""
    return on_each_pair_while(a, b, lambda x, y: not func(x, y))


def split_at(seq: S, at: int, n: int = 1) -> tuple[S, S]:
    """The items before at, and the items after the n items starting at at."""
    return first(seq, at), not_first(seq, at + n)


def split_by(seq: S, item: Any) -> tuple[S, S]:
    """The items before and after the first occurrence of item, not including it."""
    return split_at(seq, find(seq, item))


def split_by_sub(seq: S, sub: Sequence) -> tuple[S, S]:
    """The items before and after the first occurrence of sub, not including it."""
    return split_at(seq, find_sub(seq, sub), len(sub))