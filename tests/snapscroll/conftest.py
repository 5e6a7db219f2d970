from __future__ import annotations

from dataclasses import dataclass, field

from snapscroll.api.geometry import Rect
from snapscroll.api.snap import ContainerState, ItemGeometry
from snapscroll.cli import RecordingObserver

__all__ = ["FakeGeometrySource", "FakeHost", "RecordingObserver", "items_at"]


def items_at(*centers: float, width: float = 100.0) -> list[ItemGeometry]:
    return [ItemGeometry(index=i, center_x=c, width=width) for i, c in enumerate(centers)]


@dataclass(slots=True)
class FakeHost:
    container: ContainerState
    calls: int = 0

    def container_state(self) -> ContainerState:
        self.calls += 1
        return self.container


@dataclass(slots=True)
class FakeGeometrySource:
    elements: list[ItemGeometry] | None
    queries: list[Rect] = field(default_factory=list)

    def elements_in(self, rect: Rect) -> list[ItemGeometry] | None:
        self.queries.append(rect)
        return self.elements
