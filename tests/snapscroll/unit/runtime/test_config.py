from __future__ import annotations

from snapscroll.api.logging import SnapLoggingConfig
from snapscroll.api.snap import SnapParameters
from snapscroll.runtime.config import load_logging_config, load_snap_config, resolve_log_level_name


def test_load_snap_config_defaults() -> None:
    cfg = load_snap_config(env={})
    assert cfg.params == SnapParameters()
    assert cfg.line_spacing == 0.0
    assert cfg.trace_enabled is False
    assert cfg.logging == SnapLoggingConfig()


def test_load_snap_config_parses_values() -> None:
    cfg = load_snap_config(
        env={
            "SNAP_SEARCH_MULTIPLIER": "2.5",
            "SNAP_VELOCITY_THRESHOLD": " 0.4 ",
            "SNAP_DISTANCE_THRESHOLD_MULTIPLIER": "0.5",
            "SNAP_LINE_SPACING": "10",
            "SNAP_TRACE_ENABLED": "yes",
            "SNAP_LOG_LEVEL": "debug",
        }
    )
    assert cfg.params == SnapParameters(
        search_multiplier=2.5, velocity_threshold=0.4, distance_threshold_multiplier=0.5
    )
    assert cfg.line_spacing == 10.0
    assert cfg.trace_enabled is True
    assert cfg.logging.level_name == "DEBUG"


def test_load_snap_config_clamps_and_falls_back() -> None:
    cfg = load_snap_config(
        env={
            "SNAP_SEARCH_MULTIPLIER": "0.2",
            "SNAP_VELOCITY_THRESHOLD": "fast",
            "SNAP_DISTANCE_THRESHOLD_MULTIPLIER": "-3",
            "SNAP_LINE_SPACING": "-8",
            "SNAP_TRACE_ENABLED": "maybe",
        }
    )
    assert cfg.params.search_multiplier == 1.0
    assert cfg.params.velocity_threshold == 0.2
    assert cfg.params.distance_threshold_multiplier == 0.0
    assert cfg.line_spacing == 0.0
    assert cfg.trace_enabled is False


def test_nan_env_values_are_clamped_to_minimums() -> None:
    cfg = load_snap_config(env={"SNAP_SEARCH_MULTIPLIER": "nan", "SNAP_VELOCITY_THRESHOLD": "nan"})
    assert cfg.params.search_multiplier == 1.0
    assert cfg.params.velocity_threshold == 0.0


def test_load_logging_config_reads_file_and_formats() -> None:
    cfg = load_logging_config(
        env={
            "SNAP_LOG_FILE": "logs/snap.jsonl",
            "SNAP_LOG_FORMAT": "JSON",
            "SNAP_LOG_FILE_FORMAT": "text",
            "LOG_LEVEL": "warning",
        }
    )
    assert cfg == SnapLoggingConfig(
        level_name="WARNING", console_format="json", file_path="logs/snap.jsonl", file_format="text"
    )


def test_load_logging_config_ignores_unknown_formats_and_blank_file() -> None:
    cfg = load_logging_config(env={"SNAP_LOG_FILE": "  ", "SNAP_LOG_FORMAT": "xml"})
    assert cfg.file_path is None
    assert cfg.console_format == "text"


def test_resolve_log_level_prefers_snap_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SNAP_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("SNAP_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"
