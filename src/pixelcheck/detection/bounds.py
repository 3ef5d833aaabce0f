"""RectangleBounds and SearchArea value types.

All coordinates are pixel indices: x grows right, y grows down, and max_x /
max_y are inclusive. An empty bounds uses +inf / -inf sentinels so that the
first expand() always wins both min and max.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass


@dataclass
class RectangleBounds:
    """Bounding box of a set of matching pixels plus how many matched.

    pixel_count is not necessarily the box area: a hollow border or an
    irregular region covers fewer pixels than its box.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    pixel_count: int = 0

    @classmethod
    def empty(cls) -> RectangleBounds:
        return cls(math.inf, math.inf, -math.inf, -math.inf, 0)

    def expand(self, x: int, y: int) -> None:
        """Grow the box to include (x, y) and count the pixel."""
        if x < self.min_x:
            self.min_x = x
        if y < self.min_y:
            self.min_y = y
        if x > self.max_x:
            self.max_x = x
        if y > self.max_y:
            self.max_y = y
        self.pixel_count += 1

    @property
    def is_valid(self) -> bool:
        return is_valid(self)

    @property
    def width(self) -> int:
        return width(self)

    @property
    def height(self) -> int:
        return height(self)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SearchArea:
    """Inclusive clipping rectangle for the interior flood fill."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def is_valid(bounds: RectangleBounds) -> bool:
    """True if at least one pixel contributed and every coordinate is finite."""
    return (
        math.isfinite(bounds.min_x)
        and math.isfinite(bounds.min_y)
        and math.isfinite(bounds.max_x)
        and math.isfinite(bounds.max_y)
        and bounds.pixel_count > 0
    )


def width(bounds: RectangleBounds) -> int:
    """Inclusive pixel width, or 0 for an invalid bounds."""
    if not is_valid(bounds):
        return 0
    return int(bounds.max_x - bounds.min_x) + 1


def height(bounds: RectangleBounds) -> int:
    """Inclusive pixel height, or 0 for an invalid bounds."""
    if not is_valid(bounds):
        return 0
    return int(bounds.max_y - bounds.min_y) + 1
