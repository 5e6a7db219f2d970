"""Layout owner that turns host scroll decelerations into snapped offsets."""

from __future__ import annotations

import logging
import weakref
from dataclasses import replace

from snapscroll.api.geometry import Rect
from snapscroll.api.snap import (
    ContainerState,
    GeometrySource,
    ScrollDirection,
    ScrollHost,
    ScrollIntent,
    SnapObserver,
    SnapOutcome,
    SnapParameters,
    SnapResult,
)
from snapscroll.runtime.config import SnapRuntimeConfig
from snapscroll.ui_runtime.snap_resolver import resolve, search_window

logger = logging.getLogger(__name__)


class SnappingLayout:
    """Owns snapping tunables, the observer link and the geometry query."""

    def __init__(
        self,
        geometry_source: GeometrySource,
        *,
        params: SnapParameters | None = None,
        line_spacing: float = 0.0,
        scroll_direction: ScrollDirection = ScrollDirection.HORIZONTAL,
        trace_enabled: bool = False,
    ) -> None:
        self._geometry_source = geometry_source
        self._params = params if params is not None else SnapParameters()
        self._observer_ref: weakref.ref[SnapObserver] | None = None
        self.line_spacing = line_spacing
        self.scroll_direction = scroll_direction
        self.trace_enabled = trace_enabled

    @classmethod
    def from_config(cls, geometry_source: GeometrySource, config: SnapRuntimeConfig) -> SnappingLayout:
        return cls(
            geometry_source,
            params=config.params,
            line_spacing=config.line_spacing,
            trace_enabled=config.trace_enabled,
        )

    @property
    def params(self) -> SnapParameters:
        return self._params

    @params.setter
    def params(self, value: SnapParameters) -> None:
        self._params = value

    @property
    def search_multiplier(self) -> float:
        return self._params.search_multiplier

    @search_multiplier.setter
    def search_multiplier(self, value: float) -> None:
        self._params = replace(self._params, search_multiplier=value)

    @property
    def velocity_threshold(self) -> float:
        return self._params.velocity_threshold

    @velocity_threshold.setter
    def velocity_threshold(self, value: float) -> None:
        self._params = replace(self._params, velocity_threshold=value)

    @property
    def distance_threshold_multiplier(self) -> float:
        return self._params.distance_threshold_multiplier

    @distance_threshold_multiplier.setter
    def distance_threshold_multiplier(self, value: float) -> None:
        self._params = replace(self._params, distance_threshold_multiplier=value)

    @property
    def observer(self) -> SnapObserver | None:
        """Registered observer, or ``None`` once it has been collected."""
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    @observer.setter
    def observer(self, value: SnapObserver | None) -> None:
        self._observer_ref = None if value is None else weakref.ref(value)

    def search_window(self, container: ContainerState, intent: ScrollIntent) -> Rect:
        return search_window(container, intent, self._params)

    def target_content_offset(
        self,
        host: ScrollHost,
        proposed_offset_x: float,
        proposed_offset_y: float = 0.0,
        velocity_x: float = 0.0,
        velocity_y: float = 0.0,
    ) -> SnapOutcome:
        """Return where a decelerating scroll should settle."""
        params = self._params
        container = replace(
            host.container_state(),
            line_spacing=self.line_spacing,
            scroll_direction=self.scroll_direction,
        )
        intent = ScrollIntent(
            proposed_offset_x=proposed_offset_x,
            velocity_x=velocity_x,
            proposed_offset_y=proposed_offset_y,
            velocity_y=velocity_y,
        )
        window = search_window(container, intent, params)
        items = self._geometry_source.elements_in(window)
        outcome = resolve(
            items, container, intent, params, observer=self.observer, trace=self.trace_enabled
        )
        if self.trace_enabled:
            logger.debug(
                "snap query",
                extra={
                    "window_x": window.x,
                    "window_w": window.w,
                    "candidates": len(items) if items else 0,
                    "snapped": isinstance(outcome, SnapResult),
                },
            )
        return outcome
