"""Snap resolution for horizontally paging item strips."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from snapscroll.api.geometry import Rect
from snapscroll.api.snap import (
    ContainerState,
    ElementCategory,
    ItemGeometry,
    PassThroughReason,
    ScrollDirection,
    ScrollIntent,
    SnapObserver,
    SnapOutcome,
    SnapParameters,
    SnapPassThrough,
    SnapResult,
)
from snapscroll.ui_runtime.list_viewport import clamp_offset, nearest_position, step_position

logger = logging.getLogger(__name__)


def search_window(container: ContainerState, intent: ScrollIntent, params: SnapParameters) -> Rect:
    """Return the widened query rectangle centered on the proposed viewport."""
    width = container.visible_width * params.search_multiplier
    x = intent.proposed_offset_x - container.visible_width * (params.search_multiplier - 1.0) / 2.0
    return Rect(x=x, y=0.0, w=width, h=container.visible_height)


def resolve(
    items: Sequence[ItemGeometry] | None,
    container: ContainerState,
    intent: ScrollIntent,
    params: SnapParameters,
    *,
    observer: SnapObserver | None = None,
    trace: bool = False,
) -> SnapOutcome:
    """Pick the item to center for a pending scroll and return its settling offset.

    The item nearest the proposed viewport center wins, unless the gesture is a
    flick: velocity above ``params.velocity_threshold`` with a drag shorter than
    the tiny-drag threshold. A flick advances one item from the item currently
    centered, in the direction of the velocity, stopping at either end.

    Degenerate input never raises; it yields a ``SnapPassThrough`` carrying the
    proposed offset. ``observer`` is notified only for a real ``SnapResult``.
    With ``trace`` set, pass-through reasons and forced neighbors are logged at DEBUG.
    """
    if not items:
        return _pass_through(intent, PassThroughReason.NO_ITEMS, trace=trace)
    if container.scroll_direction is not ScrollDirection.HORIZONTAL:
        return _pass_through(intent, PassThroughReason.NOT_HORIZONTAL, trace=trace)

    half_width = container.visible_width / 2.0
    proposed_center_x = intent.proposed_offset_x + half_width

    cell_items = [item for item in items if item.category is ElementCategory.CELL]
    if not cell_items:
        return _pass_through(intent, PassThroughReason.NO_CELLS, trace=trace)

    current_position = nearest_position(
        cell_items, container.current_offset_x + half_width, key=_center_x
    )
    proposed_position = nearest_position(cell_items, proposed_center_x, key=_center_x)
    if current_position is None or proposed_position is None:
        return _pass_through(intent, PassThroughReason.UNRESOLVED, trace=trace)

    proposed_item = cell_items[proposed_position]
    target_item = proposed_item

    drag_distance = intent.proposed_offset_x - container.current_offset_x
    tiny_drag_threshold = (
        proposed_item.width + container.line_spacing
    ) * params.distance_threshold_multiplier
    if abs(intent.velocity_x) > params.velocity_threshold and abs(drag_distance) < tiny_drag_threshold:
        step = 1 if intent.velocity_x > 0 else -1
        target_position = step_position(current_position, step, len(cell_items))
        target_item = cell_items[target_position]
        if trace:
            logger.debug(
                "snap flick forced neighbor current=%d target=%d velocity=%.3f drag=%.3f",
                cell_items[current_position].index,
                target_item.index,
                intent.velocity_x,
                drag_distance,
            )

    if observer is not None:
        observer.on_snapped(target_item.index)

    target_offset_x = clamp_offset(
        target_item.center_x - half_width,
        container.min_offset_x,
        container.max_offset_x,
    )
    return SnapResult(
        target_offset_x=target_offset_x,
        target_index=target_item.index,
        target_offset_y=intent.proposed_offset_y,
    )


def _center_x(item: ItemGeometry) -> float:
    return item.center_x


def _pass_through(intent: ScrollIntent, reason: PassThroughReason, *, trace: bool) -> SnapPassThrough:
    if trace:
        logger.debug("snap pass-through reason=%s", reason.value)
    return SnapPassThrough(
        offset_x=intent.proposed_offset_x,
        offset_y=intent.proposed_offset_y,
        reason=reason,
    )
