"""Snapping configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from snapscroll.api.logging import SnapLoggingConfig
from snapscroll.api.snap import SnapParameters

_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class SnapRuntimeConfig:
    params: SnapParameters
    line_spacing: float
    trace_enabled: bool
    logging: SnapLoggingConfig


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _log_format(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    value = (_raw(name, env=env) or "").strip().lower()
    return value if value in _LOG_FORMATS else default


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with snap-prefixed override."""
    value = _raw("SNAP_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_logging_config(*, env: Mapping[str, str] | None = None) -> SnapLoggingConfig:
    file_path = (_raw("SNAP_LOG_FILE", env=env) or "").strip()
    return SnapLoggingConfig(
        level_name=resolve_log_level_name(env=env),
        console_format=_log_format("SNAP_LOG_FORMAT", "text", env=env),
        file_path=file_path or None,
        file_format=_log_format("SNAP_LOG_FILE_FORMAT", "json", env=env),
    )


def load_snap_config(*, env: Mapping[str, str] | None = None) -> SnapRuntimeConfig:
    defaults = SnapParameters()
    params = SnapParameters(
        search_multiplier=_float(
            "SNAP_SEARCH_MULTIPLIER", defaults.search_multiplier, minimum=1.0, env=env
        ),
        velocity_threshold=_float(
            "SNAP_VELOCITY_THRESHOLD", defaults.velocity_threshold, minimum=0.0, env=env
        ),
        distance_threshold_multiplier=_float(
            "SNAP_DISTANCE_THRESHOLD_MULTIPLIER",
            defaults.distance_threshold_multiplier,
            minimum=0.0,
            env=env,
        ),
    )
    return SnapRuntimeConfig(
        params=params,
        line_spacing=_float("SNAP_LINE_SPACING", 0.0, minimum=0.0, env=env),
        trace_enabled=_flag("SNAP_TRACE_ENABLED", False, env=env),
        logging=load_logging_config(env=env),
    )


__all__ = [
    "SnapRuntimeConfig",
    "load_logging_config",
    "load_snap_config",
    "resolve_log_level_name",
]
