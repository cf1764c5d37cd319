import itertools
import math

import pytest

from paxkit.comparison import (
    Minmax,
    abs_diff,
    about_zero,
    default_digits,
    eq,
    every,
    ge,
    gt,
    in_range,
    is_finite,
    is_nan,
    is_negative,
    is_non_negative,
    is_non_positive,
    is_non_zero,
    is_positive,
    is_zero,
    le,
    lt,
    maximum,
    mid,
    minimum,
    ne,
    none,
    similar,
    some,
)


def test_every():
    assert every(1, True, "x") is True
    assert every(1, 0) is False
    assert every() is True
    assert every(is_positive, 1, 2) is True
    assert every(is_positive, 1, -2) is False


def test_some_and_none():
    assert some(0, 0, 1) is True
    assert some(0, "") is False
    assert some(is_negative, 1, -1) is True
    assert some(is_negative, 1, 2) is False
    assert none(0, False) is True
    assert none(0, 1) is False


@pytest.mark.parametrize(
    "func, value, expected",
    [
        (is_negative, -1, True),
        (is_negative, 0, False),
        (is_non_negative, 0, True),
        (is_non_negative, -0.5, False),
        (is_zero, 0.0, True),
        (is_zero, 2, False),
        (is_non_zero, 2, True),
        (is_positive, 0, False),
        (is_positive, 3, True),
        (is_non_positive, 0, True),
        (is_non_positive, 1, False),
        (is_finite, 1.0, True),
        (is_finite, math.inf, False),
        (is_finite, math.nan, False),
        (is_finite, 7, True),
        (is_nan, math.nan, True),
        (is_nan, 1.0, False),
    ],
)
def test_predicates(func, value, expected):
    assert func(value) is expected


def test_chained_comparisons():
    assert lt(1, 2, 3) is True
    assert lt(1, 1, 2) is False
    assert le(1, 1, 2) is True
    assert le(2, 1) is False
    assert eq(2, 2, 2) is True
    assert eq(2, 2, 3) is False
    assert ne(1, 1, 2) is True
    assert ne(1, 1, 1) is False
    assert ge(3, 3, 1) is True
    assert gt(3, 3, 1) is False
    assert gt(3, 2, 1) is True


def test_comparison_needs_two_arguments():
    with pytest.raises(TypeError):
        lt(1)
    with pytest.raises(TypeError):
        ne()


def test_abs_diff_is_symmetric():
    for a, b in [(3, 5), (-2, 4), (1.5, 0.25)]:
        assert abs_diff(a, b) == abs_diff(b, a)
        assert min(a, b) + abs_diff(a, b) == max(a, b)


def test_in_range():
    assert in_range(0, 5) is True
    assert in_range(-1, 5) is False
    assert in_range(5, 5) is False
    assert in_range(1, 1, 2) is True
    assert in_range(1, 2, 2) is False
    with pytest.raises(TypeError):
        in_range(1)


def test_minimum_maximum():
    assert minimum(3, 1, 2) == 1
    assert maximum(3, 1, 2) == 3
    assert minimum(4) == 4
    assert is_nan(minimum(math.nan, 1.0))
    assert is_nan(minimum(1.0, math.nan))
    assert is_nan(maximum(2.0, math.nan, 1.0))


def test_mid():
    for perm in itertools.permutations((1, 2, 3)):
        assert mid(*perm) == 2
    assert is_nan(mid(math.nan, 1.0, 2.0))
    assert mid(5, 5, 1) == 5


def test_default_digits():
    assert default_digits(1) == 0
    assert default_digits(1.0) == 13
    assert default_digits(1, 1.0) == default_digits(1.0)


def test_about_zero():
    assert about_zero(0) is True
    assert about_zero(1) is False
    assert about_zero(1e-20) is True
    assert about_zero(1e-3, 2) is True
    assert about_zero(1e-3, 4) is False


def test_similar():
    assert similar(1.0, 1.0 + 1e-15) is True
    assert similar(1.0, 1.1) is False
    assert similar(1.0, 1.01, 1) is True
    assert similar(0.0, 0.0) is True
    assert similar(0.0, 1e-20) is True
    assert similar(1e-20, 0.0) is True
    assert similar(3, 3) is True
    assert similar(3, 4) is False


def test_minmax_empty():
    mm = Minmax()
    assert mm.is_empty() is True
    mm.add(Minmax())
    assert mm.is_empty() is True


def test_minmax_accumulates():
    mm = Minmax(3, 1, 2)
    assert mm.is_empty() is False
    assert (mm.min, mm.max) == (1, 3)
    assert mm.add(0).add(7) is mm
    assert tuple(mm) == (0, 7)
    assert mm.to_dict() == {"min": 0, "max": 7}


def test_minmax_merge():
    mm = Minmax(5).add(Minmax(2, 9))
    assert (mm.min, mm.max) == (2, 9)