"""Public snapscroll API contracts."""

from snapscroll.api.geometry import Rect
from snapscroll.api.logging import SnapLoggingConfig
from snapscroll.api.snap import (
    ContainerState,
    ElementCategory,
    GeometrySource,
    ItemGeometry,
    PassThroughReason,
    ScrollDirection,
    ScrollHost,
    ScrollIntent,
    SnapObserver,
    SnapOutcome,
    SnapParameters,
    SnapPassThrough,
    SnapResult,
)

__all__ = [
    "ContainerState",
    "ElementCategory",
    "GeometrySource",
    "ItemGeometry",
    "PassThroughReason",
    "Rect",
    "ScrollDirection",
    "ScrollHost",
    "ScrollIntent",
    "SnapLoggingConfig",
    "SnapObserver",
    "SnapOutcome",
    "SnapParameters",
    "SnapPassThrough",
    "SnapResult",
]
