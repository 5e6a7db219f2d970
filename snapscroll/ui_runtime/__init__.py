"""Snapping layout and resolution helpers."""

from snapscroll.ui_runtime.list_viewport import clamp_offset, nearest_position, step_position
from snapscroll.ui_runtime.snap_resolver import resolve, search_window
from snapscroll.ui_runtime.snapping_layout import SnappingLayout
from snapscroll.ui_runtime.strip_layout import UniformStripLayout

__all__ = [
    "SnappingLayout",
    "UniformStripLayout",
    "clamp_offset",
    "nearest_position",
    "resolve",
    "search_window",
    "step_position",
]
