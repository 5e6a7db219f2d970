"""Generic list-viewport helpers for scrollable item strips."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def nearest_position(items: Sequence[T], target: float, key: Callable[[T], float]) -> int | None:
    """Return the position of the item whose key is closest to ``target``.

    Scans left to right with a strict ``<`` comparison, so the earliest item
    wins exact ties. Returns ``None`` for an empty sequence.
    """
    best_position: int | None = None
    best_distance = 0.0
    for position, item in enumerate(items):
        distance = abs(key(item) - target)
        if best_position is None or distance < best_distance:
            best_position = position
            best_distance = distance
    return best_position


def step_position(position: int, step: int, total_count: int) -> int:
    """Move ``position`` by ``step`` without wrapping past either end."""
    if total_count <= 0:
        return 0
    return max(0, min(position + step, total_count - 1))


def clamp_offset(offset: float, min_offset: float, max_offset: float) -> float:
    """Clamp an offset to viewport bounds; ``min_offset`` wins when the bounds are inverted."""
    return max(min_offset, min(offset, max_offset))
