"""Public geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    def overlaps_x(self, left: float, right: float) -> bool:
        """Return whether a horizontal span intersects the rectangle's extent."""
        return left <= self.right and right >= self.x
