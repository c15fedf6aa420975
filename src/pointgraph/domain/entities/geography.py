import numbers
from collections.abc import Iterable
from dataclasses import dataclass

U32_MAX = 0xFFFFFFFF
# Largest coordinate for which no pair of points can overflow a u32 squared distance.
MAX_COORD = 46340


def swap_remove(seq: list, index: int):
    """Remove seq[index] in O(1) by moving the last element into its slot."""
    n = len(seq)
    if not -n <= index < n:
        raise IndexError(f"index {index} out of range for {n} items")
    index %= n
    last = seq.pop()
    if index == n - 1:
        return last
    item, seq[index] = seq[index], last
    return item


# Core geometry type used by the graph
@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        for name in ("x", "y"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Integral) or v < 0:
                raise ValueError(f"{name} must be a non-negative int, got {v!r}")
            # numpy integers become plain ints so distances never wrap
            object.__setattr__(self, name, int(v))

    def distance(self, other: "Point") -> int:
        """Squared Euclidean distance (no square root)."""
        dx, dy = self.x - other.x, self.y - other.y
        d = dx * dx + dy * dy
        if d > U32_MAX:
            raise OverflowError(f"squared distance {d} between {self} and {other} exceeds u32")
        return d

    def equals(self, other: "Point") -> bool:
        return self == other

    def closest(self, candidates: list["Point"]) -> "Point":
        """
        Pop and return the candidate nearest to self.
        Ties go to the first one in scan order; removal is a swap-remove.
        """
        if not candidates:
            raise ValueError("closest() needs at least one candidate")
        best = min(range(len(candidates)), key=lambda i: self.distance(candidates[i]))
        return swap_remove(candidates, best)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def is_in(self, points: Iterable["Point"]) -> bool:
        return any(self == p for p in points)
