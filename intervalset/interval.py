from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A contiguous run of integers.

    Membership treats ``stop`` as exclusive while ``length()`` counts it as
    inclusive. Both conventions are relied on by callers; keep them as is.
    """

    start: int
    stop: int

    def contains(self, item: int) -> bool:
        return self.start <= item < self.stop

    def __contains__(self, item: int) -> bool:
        return self.contains(item)

    def length(self) -> int:
        return max(self.stop - self.start + 1, 0)

    def __str__(self) -> str:
        if self.start == self.stop:
            return str(self.start)
        return f"{self.start}..{self.stop}"
