"""Snap-to-center resolution for horizontally paging item strips."""

from snapscroll.api.snap import (
    ContainerState,
    ItemGeometry,
    ScrollIntent,
    SnapParameters,
    SnapPassThrough,
    SnapResult,
)
from snapscroll.ui_runtime.snap_resolver import resolve

__all__ = [
    "ContainerState",
    "ItemGeometry",
    "ScrollIntent",
    "SnapParameters",
    "SnapPassThrough",
    "SnapResult",
    "resolve",
]
