"""Sets of token types stored as sorted runs of integers.

An ``IntervalSet`` keeps its intervals sorted by start, pairwise disjoint and
never touching, so a set such as "every code point but the controls" costs a
handful of records.

Bound conventions are mixed and callers depend on them:

- ``contains`` and insertion adjacency treat ``stop`` as exclusive
- ``length`` counts ``stop`` as inclusive
- renderers treat an interval as a singleton when ``stop == start + 1``
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from functools import reduce

from typing_extensions import Self, override

from intervalset.interval import Interval
from intervalset.render import RenderOptions, render
from intervalset.render import element_name as _element_name
from intervalset.tokens import TOKEN_INVALID_TYPE

logger = logging.getLogger(__name__)


class ReadOnlyError(RuntimeError):
    """Raised when a mutating call reaches a read-only set."""


class IntervalSet:
    """Mutable ordered set of integers.

    Not safe for concurrent mutation; callers serialize ``add_*``/``remove_*``.
    """

    def __init__(
        self, intervals: Iterable[Interval] = (), *, read_only: bool = False
    ) -> None:
        self._intervals: list[Interval] = []
        self._read_only: bool = False
        for interval in intervals:
            self.add_interval(interval)
        self._read_only = read_only

    @classmethod
    def of(cls, start: int, stop: int) -> Self:
        result = cls()
        result.add_range(start, stop)
        return result

    @classmethod
    def of_one(cls, value: int) -> Self:
        result = cls()
        result.add_one(value)
        return result

    @property
    def read_only(self) -> bool:
        return self._read_only

    @read_only.setter
    def read_only(self, value: bool) -> None:
        if self._read_only and not value:
            raise ReadOnlyError(
                "Cannot make a read-only IntervalSet writable again.\n"
                "Hint: take a writable copy instead: s.copy()"
            )
        self._read_only = value

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Snapshot of the stored intervals in ascending order."""
        return tuple(self._intervals)

    def _check_writable(self, operation: str) -> None:
        if self._read_only:
            logger.debug("rejected %s on read-only set", operation)
            raise ReadOnlyError(
                f"Cannot call {operation}() on a read-only IntervalSet.\n"
                f"Hint: mutate a writable copy: s.copy().{operation}(...)"
            )

    def copy(self) -> Self:
        result = type(self)()
        result._intervals = [
            Interval(start=i.start, stop=i.stop) for i in self._intervals
        ]
        return result

    def clear(self) -> None:
        self._check_writable("clear")
        self._intervals.clear()

    # -- insertion ---------------------------------------------------------

    def add_one(self, value: int) -> None:
        self.add_interval(Interval(start=value, stop=value + 1))

    def add_range(self, start: int, stop: int) -> None:
        """Add the raw pair ``(start, stop)``; see the module notes on bounds."""
        self.add_interval(Interval(start=start, stop=stop))

    def add_interval(self, interval: Interval) -> None:
        """Merge ``interval`` into the set, keeping the intervals coalesced.

        The first existing interval that ``interval`` precedes, touches on the
        left, or overlaps decides the outcome; otherwise it goes at the end.
        """
        self._check_writable("add_interval")
        intervals = self._intervals
        for k, existing in enumerate(intervals):
            if interval.stop < existing.start:
                intervals.insert(k, interval)
                return
            if interval.stop == existing.start:
                intervals[k] = replace(existing, start=interval.start)
                return
            if interval.start <= existing.stop:
                intervals[k] = Interval(
                    start=min(existing.start, interval.start),
                    stop=max(existing.stop, interval.stop),
                )
                self._reduce(k)
                return

        intervals.append(interval)

    def _reduce(self, k: int) -> None:
        """Coalesce forward from slot ``k`` after it has grown."""
        intervals = self._intervals
        while k < len(intervals) - 1:
            left, right = intervals[k], intervals[k + 1]
            if left.stop >= right.stop:
                # Swallowed whole; the next neighbour may be reachable too
                del intervals[k + 1]
            elif left.stop >= right.start:
                intervals[k] = Interval(start=left.start, stop=right.stop)
                del intervals[k + 1]
                return
            else:
                return

    def add_set(self, other: "IntervalSet") -> Self:
        """Union ``other`` into this set and return this set."""
        self._check_writable("add_set")
        for interval in list(other._intervals):
            self.add_interval(Interval(start=interval.start, stop=interval.stop))
        return self

    # -- subtraction -------------------------------------------------------

    def remove_one(self, value: int) -> None:
        self._check_writable("remove_one")
        intervals = self._intervals
        for k, current in enumerate(intervals):
            if value < current.start:
                # Sorted: nothing later can hold it
                return
            if value == current.start and value == current.stop - 1:
                del intervals[k]
                return
            if value == current.start:
                intervals[k] = replace(current, start=current.start + 1)
                return
            # Compares against stop itself, not stop - 1
            if value == current.stop:
                intervals[k] = replace(current, stop=current.stop - 1)
                return
            if value < current.stop:
                intervals[k] = replace(current, start=value + 1)
                intervals.insert(k, Interval(start=current.start, stop=value - 1))
                return

    def remove_range(self, interval: Interval) -> None:
        self._check_writable("remove_range")
        if interval.start == interval.stop - 1:
            self.remove_one(interval.start)
            return

        intervals = self._intervals
        k = 0
        while k < len(intervals):
            current = intervals[k]
            if interval.stop <= current.start:
                return
            if interval.start > current.start and interval.stop < current.stop:
                intervals[k] = replace(current, stop=interval.start)
                intervals.insert(k + 1, Interval(start=interval.stop, stop=current.stop))
                return
            if interval.start <= current.start and interval.stop >= current.stop:
                # Next interval shifts into slot k
                del intervals[k]
                continue
            if interval.start < current.stop:
                intervals[k] = replace(current, stop=interval.start)
            elif interval.stop < current.stop:
                # Unreachable in practice: the interior split above catches these
                intervals[k] = replace(current, start=interval.stop)
            k += 1

    # -- queries -----------------------------------------------------------

    def contains(self, item: int) -> bool:
        return any(interval.contains(item) for interval in self._intervals)

    def __contains__(self, item: int) -> bool:
        return self.contains(item)

    def length(self) -> int:
        return sum(interval.length() for interval in self._intervals)

    def first(self) -> int:
        """Smallest start, or ``TOKEN_INVALID_TYPE`` when the set is empty."""
        if not self._intervals:
            return TOKEN_INVALID_TYPE
        return self._intervals[0].start

    def is_empty(self) -> bool:
        return not self._intervals

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def single_element(self) -> int | None:
        if len(self._intervals) == 1:
            only = self._intervals[0]
            if only.stop == only.start + 1:
                return only.start
        return None

    def max_element(self) -> int | None:
        if not self._intervals:
            return None
        return self._intervals[-1].stop - 1

    def elements(self) -> Iterator[int]:
        """Yield every contained value in ascending order."""
        for interval in self._intervals:
            yield from range(interval.start, interval.stop)

    # -- derivation --------------------------------------------------------

    def complement(self, start: int, stop: int) -> "IntervalSet":
        """Return the values of the closed range ``[start, stop]`` not in this set."""
        result = IntervalSet()
        result.add_interval(Interval(start=start, stop=stop + 1))
        for interval in self._intervals:
            result.remove_range(interval)
        logger.debug(
            "complement within [%d, %d] has %d intervals",
            start,
            stop,
            len(result._intervals),
        )
        return result

    def union(self, other: "IntervalSet") -> Self:
        return self.copy().add_set(other)

    def subtract(self, other: "IntervalSet") -> Self:
        result = self.copy()
        for interval in other._intervals:
            result.remove_range(interval)
        return result

    def intersection(self, other: "IntervalSet") -> "IntervalSet":
        """Overlaps of the two sets, walking both interval lists in step."""
        result = IntervalSet()
        mine, theirs = self._intervals, other._intervals
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            lo = max(a.start, b.start)
            hi = min(a.stop, b.stop)
            if lo < hi:
                result.add_interval(Interval(start=lo, stop=hi))
            # Advance whichever ends first; the other may overlap the next one
            if a.stop < b.stop:
                i += 1
            elif b.stop < a.stop:
                j += 1
            else:
                i += 1
                j += 1
        return result

    def __or__(self, other: "IntervalSet") -> "IntervalSet":
        return self.union(other)

    def __and__(self, other: "IntervalSet") -> "IntervalSet":
        return self.intersection(other)

    def __sub__(self, other: "IntervalSet") -> "IntervalSet":
        return self.subtract(other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None  # type: ignore[assignment]

    # -- rendering ---------------------------------------------------------

    def to_string(
        self,
        literal_names: Sequence[str] | None = None,
        symbolic_names: Sequence[str] | None = None,
        elems_are_char: bool = False,
    ) -> str:
        """Render the set; see ``intervalset.render`` for the three modes.

        Named rendering requires the tables to cover every element.
        """
        options = RenderOptions(
            literal_names=literal_names,
            symbolic_names=symbolic_names,
            elems_are_char=elems_are_char,
        )
        return render(self._intervals, options)

    def element_name(
        self,
        literal_names: Sequence[str] | None,
        symbolic_names: Sequence[str] | None,
        a: int,
    ) -> str:
        return _element_name(literal_names, symbolic_names, a)

    @override
    def __str__(self) -> str:
        return self.to_string()

    @override
    def __repr__(self) -> str:
        return f"IntervalSet({self._intervals!r})"


def union(*sets: IntervalSet) -> IntervalSet:
    """Union any number of sets into a new set (equivalent to chaining `|`)."""

    def reducer(acc: IntervalSet, nxt: IntervalSet) -> IntervalSet:
        return acc.add_set(nxt)

    return reduce(reducer, sets, IntervalSet())


def intersection(*sets: IntervalSet) -> IntervalSet:
    """Intersect sets (equivalent to chaining `&`)."""

    if not sets:
        raise ValueError(
            f"intersection() requires at least one set argument.\n"
            f"Example: intersection(follow_a, follow_b)"
        )

    def reducer(acc: IntervalSet, nxt: IntervalSet) -> IntervalSet:
        return acc & nxt

    return reduce(reducer, sets[1:], sets[0].copy())
