"""Chained comparisons, predicates, min/max helpers and approximate equality."""

from __future__ import annotations

import math
import sys
from typing import Any, Callable

_FLOAT_DIGITS = sys.float_info.dig - 2


def _split_predicate(args: tuple) -> tuple[Callable[[Any], Any] | None, tuple]:
    if args and callable(args[0]):
        return args[0], args[1:]
    return None, args


def every(*args: Any) -> bool:
    """True iff every argument is truthy, or satisfies a leading predicate."""
    pred, values = _split_predicate(args)
    if pred is None:
        return all(bool(v) for v in values)
    return all(bool(pred(v)) for v in values)


def some(*args: Any) -> bool:
    """True iff at least one argument is truthy, or satisfies a leading predicate."""
    pred, values = _split_predicate(args)
    if pred is None:
        return any(bool(v) for v in values)
    return any(bool(pred(v)) for v in values)


def none(*args: Any) -> bool:
    """True iff no argument is truthy."""
    return not any(bool(v) for v in args)


def is_negative(value: Any) -> bool:
    return value < 0


def is_non_negative(value: Any) -> bool:
    return value >= 0


def is_zero(value: Any) -> bool:
    return value == 0


def is_non_zero(value: Any) -> bool:
    return value != 0


def is_positive(value: Any) -> bool:
    return value > 0


def is_non_positive(value: Any) -> bool:
    return value <= 0


def is_finite(value: Any) -> bool:
    """True unless value is an infinity or a NaN; non-float values are finite."""
    try:
        return math.isfinite(value)
    except TypeError:
        return True


def is_nan(value: Any) -> bool:
    """True iff value is a NaN."""
    return value != value


def _chain(args: tuple, relation: Callable[[Any, Any], bool]) -> bool:
    if len(args) < 2:
        raise TypeError("a comparison needs at least two arguments")
    return all(relation(a, b) for a, b in zip(args, args[1:]))


def lt(*args: Any) -> bool:
    """True iff the arguments are strictly ascending."""
    return _chain(args, lambda a, b: a < b)


def le(*args: Any) -> bool:
    """True iff the arguments are weakly ascending."""
    return _chain(args, lambda a, b: a <= b)


def eq(*args: Any) -> bool:
    """True iff all arguments are equal."""
    return _chain(args, lambda a, b: a == b)


def ne(*args: Any) -> bool:
    """True iff some pair of neighbouring arguments differs."""
    if len(args) < 2:
        raise TypeError("a comparison needs at least two arguments")
    return any(a != b for a, b in zip(args, args[1:]))


def ge(*args: Any) -> bool:
    """True iff the arguments are weakly descending."""
    return _chain(args, lambda a, b: a >= b)


def gt(*args: Any) -> bool:
    """True iff the arguments are strictly descending."""
    return _chain(args, lambda a, b: a > b)


def abs_diff(a: Any, b: Any) -> Any:
    """The absolute difference of a and b."""
    return b - a if a < b else a - b


def in_range(*args: Any) -> bool:
    """With (a, b): 0 <= a < b. With (a, b, c): a <= b < c."""
    if len(args) == 2:
        a, b = args
        return is_non_negative(a) and a < b
    if len(args) == 3:
        a, b, c = args
        return a <= b < c
    raise TypeError("in_range takes two or three arguments")


def _fold(args: tuple, better: Callable[[Any, Any], bool]) -> Any:
    if not args:
        raise TypeError("at least one argument is required")
    result = args[-1]
    for value in reversed(args[:-1]):
        if is_nan(value) or better(value, result):
            result = value
    return result


def minimum(*args: Any) -> Any:
    """The smallest argument; a NaN among the arguments is returned as is."""
    return _fold(args, lambda a, b: a < b)


def maximum(*args: Any) -> Any:
    """The largest argument; a NaN among the arguments is returned as is."""
    return _fold(args, lambda a, b: a > b)


def mid(a: Any, b: Any, c: Any) -> Any:
    """The middle value of three."""
    if is_nan(a) or is_nan(b):
        return math.nan
    if a < b:
        return b if b < c else (a if c < a else c)
    return a if a < c else (b if c < b else c)


def default_digits(*args: Any) -> int:
    """Digits used by about_zero/similar: 0 for integers only, else float digits minus two."""
    if any(isinstance(v, float) for v in args):
        return _FLOAT_DIGITS
    return 0


def _is_integral(value: Any) -> bool:
    return isinstance(value, int)


def about_zero(value: Any, digits: int | None = None) -> bool:
    """Integers: value == 0. Otherwise: abs(value) < 10**-digits."""
    if digits is None:
        digits = default_digits(value)
    if _is_integral(value):
        return value == 0
    return abs(value) < 10.0 ** -digits


def similar(a: Any, b: Any, digits: int | None = None) -> bool:
    """True iff a and b agree in about `digits` significant digits."""
    if digits is None:
        digits = default_digits(a, b)
    if _is_integral(a) and _is_integral(b):
        return a == b
    if a == b:
        return True
    if a:
        if b:
            return abs_diff(a, b) < (abs(a) + abs(b)) * 10.0 ** -digits
        return about_zero(a, digits)
    return about_zero(b, digits) if b else True


class Minmax:
    """Keeps track of the smallest and largest value seen."""

    __slots__ = ("_low", "_high")

    def __init__(self, *values: Any) -> None:
        self._low: Any = math.inf
        self._high: Any = -math.inf
        if values:
            self._low = self._high = values[0]
            for value in values[1:]:
                self.add(value)

    @property
    def min(self) -> Any:
        return self._low

    @property
    def max(self) -> Any:
        return self._high

    def add(self, value: Any) -> "Minmax":
        """Accumulate a value or another Minmax; returns self."""
        if isinstance(value, Minmax):
            self._low = minimum(value.min, self._low)
            self._high = maximum(value.max, self._high)
        else:
            self._low = minimum(value, self._low)
            self._high = maximum(value, self._high)
        return self

    def is_empty(self) -> bool:
        """True while nothing has been accumulated."""
        return self._low > self._high

    def to_dict(self) -> dict[str, Any]:
        return {"min": self._low, "max": self._high}

    def __iter__(self):
        yield self._low
        yield self._high

    def __repr__(self) -> str:
        return f"Minmax(min={self._low!r}, max={self._high!r})"