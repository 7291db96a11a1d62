from dataclasses import FrozenInstanceError

import pytest

from intervalset import Interval


def test_contains_treats_stop_as_exclusive() -> None:
    interval = Interval(start=2, stop=5)

    assert interval.contains(2)
    assert interval.contains(4)
    assert not interval.contains(5)
    assert not interval.contains(1)
    assert 3 in interval


def test_str_collapses_equal_bounds() -> None:
    assert str(Interval(start=3, stop=3)) == "3"
    assert str(Interval(start=3, stop=4)) == "3..4"
    assert str(Interval(start=-1, stop=7)) == "-1..7"


def test_length_counts_stop_and_floors_at_zero() -> None:
    assert Interval(start=1, stop=3).length() == 3
    assert Interval(start=3, stop=3).length() == 1
    assert Interval(start=5, stop=2).length() == 0


def test_inverted_pair_is_a_legal_value() -> None:
    interval = Interval(start=5, stop=2)

    assert not interval.contains(3)
    assert str(interval) == "5..2"


def test_interval_is_frozen() -> None:
    interval = Interval(start=1, stop=2)

    with pytest.raises(FrozenInstanceError):
        interval.start = 0  # type: ignore[misc]


def test_intervals_compare_by_bounds() -> None:
    assert Interval(start=1, stop=4) == Interval(start=1, stop=4)
    assert Interval(start=1, stop=4) != Interval(start=1, stop=5)
