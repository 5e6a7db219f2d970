"""Command line tool that resolves one scroll deceleration over a uniform strip."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field, replace

from snapscroll.api.snap import ContainerState, SnapResult
from snapscroll.runtime.config import SnapRuntimeConfig, load_snap_config
from snapscroll.runtime.logging import setup_logging, shutdown_logging
from snapscroll.ui_runtime.snapping_layout import SnappingLayout
from snapscroll.ui_runtime.strip_layout import UniformStripLayout

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StaticScrollHost:
    """Scroll host whose viewport is fixed at construction."""

    strip: UniformStripLayout
    visible_width: float
    visible_height: float = 0.0
    left_inset: float = 0.0
    right_inset: float = 0.0
    current_offset_x: float = 0.0

    def container_state(self) -> ContainerState:
        return ContainerState(
            visible_width=self.visible_width,
            content_width=self.strip.content_width,
            left_inset=self.left_inset,
            right_inset=self.right_inset,
            current_offset_x=self.current_offset_x,
            visible_height=self.visible_height,
        )


@dataclass(slots=True, weakref_slot=True)
class RecordingObserver:
    """Observer that keeps every snapped index in call order."""

    snapped: list[int] = field(default_factory=list)

    def on_snapped(self, target_index: int) -> None:
        self.snapped.append(target_index)


def build_parser(config: SnapRuntimeConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapscroll-probe",
        description="Resolve where a horizontal scroll over a uniform item strip settles.",
    )
    parser.add_argument("--item-width", type=float, required=True)
    parser.add_argument("--item-count", type=int, required=True)
    parser.add_argument("--line-spacing", type=float, default=config.line_spacing)
    parser.add_argument("--visible-width", type=float, required=True)
    parser.add_argument("--left-inset", type=float, default=0.0)
    parser.add_argument("--right-inset", type=float, default=0.0)
    parser.add_argument("--current-offset", type=float, default=0.0)
    parser.add_argument("--proposed-offset", type=float, required=True)
    parser.add_argument("--velocity", type=float, default=0.0)
    parser.add_argument("--search-multiplier", type=float, default=config.params.search_multiplier)
    parser.add_argument("--velocity-threshold", type=float, default=config.params.velocity_threshold)
    parser.add_argument(
        "--distance-threshold-multiplier",
        type=float,
        default=config.params.distance_threshold_multiplier,
    )
    parser.add_argument("--trace", action="store_true", default=config.trace_enabled)
    parser.add_argument("--log-file", default=config.logging.file_path)
    parser.add_argument("--log-format", choices=("text", "json"), default=config.logging.console_format)
    return parser


def _apply_overrides(config: SnapRuntimeConfig, args: argparse.Namespace) -> SnapRuntimeConfig:
    return replace(
        config,
        params=replace(
            config.params,
            search_multiplier=args.search_multiplier,
            velocity_threshold=args.velocity_threshold,
            distance_threshold_multiplier=args.distance_threshold_multiplier,
        ),
        line_spacing=args.line_spacing,
        trace_enabled=args.trace,
        logging=replace(config.logging, file_path=args.log_file, console_format=args.log_format),
    )


def main(argv: Sequence[str] | None = None, *, config: SnapRuntimeConfig | None = None) -> int:
    base_config = config if config is not None else load_snap_config()
    parser = build_parser(base_config)
    args = parser.parse_args(argv)
    try:
        run_config = _apply_overrides(base_config, args)
        strip = UniformStripLayout(
            item_width=args.item_width,
            item_count=args.item_count,
            line_spacing=run_config.line_spacing,
        )
    except ValueError as exc:
        parser.error(str(exc))

    owns_logging = setup_logging(run_config.logging)
    try:
        host = StaticScrollHost(
            strip=strip,
            visible_width=args.visible_width,
            left_inset=args.left_inset,
            right_inset=args.right_inset,
            current_offset_x=args.current_offset,
        )
        layout = SnappingLayout.from_config(strip, run_config)
        observer = RecordingObserver()
        layout.observer = observer
        outcome = layout.target_content_offset(
            host, proposed_offset_x=args.proposed_offset, velocity_x=args.velocity
        )
        payload: dict[str, object] = {
            "snapped": isinstance(outcome, SnapResult),
            "outcome": asdict(outcome),
            "observed": list(observer.snapped),
        }
        logger.info("snap resolved", extra={"snapped": payload["snapped"], "observed": payload["observed"]})
        print(json.dumps(payload, sort_keys=True))
    finally:
        if owns_logging:
            shutdown_logging()
    return 0
