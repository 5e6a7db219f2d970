"""Public snapping contracts shared by layouts, hosts and observers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from snapscroll.api.geometry import Rect


class ElementCategory(StrEnum):
    CELL = "cell"
    SUPPLEMENTARY = "supplementary"
    DECORATION = "decoration"


class ScrollDirection(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class PassThroughReason(StrEnum):
    """Why a resolution left the proposed offset untouched."""

    NO_ITEMS = "no_items"
    NOT_HORIZONTAL = "not_horizontal"
    NO_CELLS = "no_cells"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True, slots=True)
class ItemGeometry:
    """Laid-out horizontal geometry of one element."""

    index: int
    center_x: float
    width: float
    category: ElementCategory = ElementCategory.CELL


@dataclass(frozen=True, slots=True)
class ContainerState:
    """Scrollable viewport snapshot supplied fresh for each resolution."""

    visible_width: float
    content_width: float
    left_inset: float = 0.0
    right_inset: float = 0.0
    current_offset_x: float = 0.0
    visible_height: float = 0.0
    line_spacing: float = 0.0
    scroll_direction: ScrollDirection = ScrollDirection.HORIZONTAL

    @property
    def min_offset_x(self) -> float:
        return -self.left_inset

    @property
    def max_offset_x(self) -> float:
        return self.content_width - self.visible_width + self.right_inset


@dataclass(frozen=True, slots=True)
class ScrollIntent:
    """Pending scroll computed by the host gesture system."""

    proposed_offset_x: float
    velocity_x: float = 0.0
    proposed_offset_y: float = 0.0
    velocity_y: float = 0.0


@dataclass(frozen=True, slots=True)
class SnapParameters:
    """Tunables for neighbor forcing and candidate search.

    ``search_multiplier`` widens the candidate query window around the
    proposed viewport; larger values are more robust for fast flicks.
    ``velocity_threshold`` is the minimum absolute velocity that may promote a
    swipe to a flick. ``distance_threshold_multiplier`` is the fraction of one
    item pitch (width plus spacing) below which a drag still counts as tiny.
    """

    search_multiplier: float = 1.5
    velocity_threshold: float = 0.2
    distance_threshold_multiplier: float = 0.75

    def __post_init__(self) -> None:
        if not self.search_multiplier >= 1.0:
            raise ValueError(f"search_multiplier must be >= 1.0: {self.search_multiplier!r}")
        if not self.velocity_threshold >= 0.0:
            raise ValueError(f"velocity_threshold must be >= 0: {self.velocity_threshold!r}")
        if not self.distance_threshold_multiplier >= 0.0:
            raise ValueError(
                "distance_threshold_multiplier must be >= 0: "
                f"{self.distance_threshold_multiplier!r}"
            )


@dataclass(frozen=True, slots=True)
class SnapResult:
    """Settling offset that centers the chosen item."""

    target_offset_x: float
    target_index: int
    target_offset_y: float = 0.0


@dataclass(frozen=True, slots=True)
class SnapPassThrough:
    """Proposed offset returned unchanged; no item was snapped to."""

    offset_x: float
    offset_y: float
    reason: PassThroughReason


SnapOutcome = SnapResult | SnapPassThrough


class SnapObserver(Protocol):
    """Receives the index of the item a resolution settled on."""

    def on_snapped(self, target_index: int) -> None: ...


class GeometrySource(Protocol):
    """Supplies laid-out element geometry overlapping a query window."""

    def elements_in(self, rect: Rect) -> Sequence[ItemGeometry] | None: ...


class ScrollHost(Protocol):
    """Scroll view that owns the viewport and applies settling offsets."""

    def container_state(self) -> ContainerState: ...
