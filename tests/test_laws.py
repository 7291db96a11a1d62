"""Property tests for the set algebra.

Ranges are drawn half-open and non-empty, which is the domain where insertion,
union and complement behave as ordinary set operations.
"""

import hypothesis.strategies as st
from hypothesis import given

from intervalset import Interval, IntervalSet

PROBES = range(-70, 80)

ranges = st.builds(
    lambda start, width: (start, start + width),
    st.integers(-60, 60),
    st.integers(1, 12),
)

range_lists = st.lists(ranges, max_size=12)


def build(pairs: list[tuple[int, int]]) -> IntervalSet:
    s = IntervalSet()
    for start, stop in pairs:
        s.add_range(start, stop)
    return s


@given(range_lists)
def test_intervals_stay_sorted_disjoint_and_apart(pairs) -> None:
    s = build(pairs)
    stored = s.intervals

    for interval in stored:
        assert interval.start < interval.stop
    for left, right in zip(stored, stored[1:]):
        assert left.stop < right.start


@given(range_lists)
def test_membership_matches_added_ranges(pairs) -> None:
    s = build(pairs)

    for x in PROBES:
        assert s.contains(x) == any(start <= x < stop for start, stop in pairs)


@given(range_lists, range_lists)
def test_union_is_commutative(left, right) -> None:
    a, b = build(left), build(right)

    ab = a.copy().add_set(b)
    ba = b.copy().add_set(a)

    assert ab == ba
    for x in PROBES:
        assert ab.contains(x) == ba.contains(x)


@given(range_lists)
def test_re_adding_covered_ranges_is_idempotent(pairs) -> None:
    s = build(pairs)
    before = s.intervals

    for interval in before:
        s.add_interval(Interval(start=interval.start, stop=interval.stop))
        s.add_one(interval.start)

    assert s.intervals == before


inner_ranges = st.lists(
    st.builds(
        lambda start, width: (start, start + width),
        st.integers(1, 80),
        st.integers(2, 10),
    ),
    max_size=10,
)


@given(inner_ranges)
def test_complement_partitions_bounding_range(pairs) -> None:
    lo, hi = 0, 100
    s = build(pairs)
    rest = s.complement(lo, hi)

    for x in range(lo, hi + 1):
        assert s.contains(x) != rest.contains(x)


@given(range_lists, range_lists)
def test_intersection_matches_membership(left, right) -> None:
    a, b = build(left), build(right)
    both = a & b

    for x in PROBES:
        assert both.contains(x) == (a.contains(x) and b.contains(x))
