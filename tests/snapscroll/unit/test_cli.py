from __future__ import annotations

import json
import logging

import pytest

from snapscroll.cli import main
from snapscroll.runtime.config import load_snap_config
from snapscroll.runtime.logging import shutdown_logging

STRIP_ARGS = [
    "--item-width",
    "100",
    "--item-count",
    "10",
    "--line-spacing",
    "10",
    "--visible-width",
    "300",
]
FLICK_ARGS = ["--current-offset", "120", "--proposed-offset", "130", "--velocity", "1.0"]


def test_cli_prints_snapped_outcome(capsys) -> None:
    code = main([*STRIP_ARGS, *FLICK_ARGS], config=load_snap_config(env={}))
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["snapped"] is True
    assert payload["outcome"] == {"target_offset_x": 230.0, "target_index": 3, "target_offset_y": 0.0}
    assert payload["observed"] == [3]


def test_cli_reports_pass_through_for_empty_strip(capsys) -> None:
    code = main(
        ["--item-width", "100", "--item-count", "0", "--visible-width", "300", "--proposed-offset", "42"],
        config=load_snap_config(env={}),
    )
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["snapped"] is False
    assert payload["outcome"] == {"offset_x": 42.0, "offset_y": 0.0, "reason": "no_items"}
    assert payload["observed"] == []


def test_cli_uses_config_unless_flags_override(capsys) -> None:
    config = load_snap_config(env={"SNAP_VELOCITY_THRESHOLD": "2.0"})

    main([*STRIP_ARGS, *FLICK_ARGS], config=config)
    from_config = json.loads(capsys.readouterr().out)
    main([*STRIP_ARGS, *FLICK_ARGS, "--velocity-threshold", "0.5"], config=config)
    overridden = json.loads(capsys.readouterr().out)

    assert from_config["outcome"]["target_index"] == 2
    assert overridden["outcome"]["target_index"] == 3


def test_cli_reads_environment_by_default(monkeypatch, capsys) -> None:
    monkeypatch.setenv("SNAP_VELOCITY_THRESHOLD", "2.0")
    main([*STRIP_ARGS, *FLICK_ARGS])
    assert json.loads(capsys.readouterr().out)["outcome"]["target_index"] == 2


@pytest.mark.parametrize("bad_flag", [["--search-multiplier", "0.5"], ["--search-multiplier", "nan"]])
def test_cli_rejects_invalid_parameters(bad_flag: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([*STRIP_ARGS, "--proposed-offset", "0", *bad_flag], config=load_snap_config(env={}))
    assert excinfo.value.code == 2


def test_cli_writes_json_log_file(tmp_path, capsys) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "snap.jsonl"
    try:
        root.handlers.clear()
        main(
            [*STRIP_ARGS, *FLICK_ARGS, "--trace", "--log-file", str(log_path)],
            config=load_snap_config(env={"SNAP_LOG_LEVEL": "DEBUG"}),
        )
        capsys.readouterr()
        records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)

    by_logger = {record["logger"]: record for record in records}
    assert by_logger["snapscroll.ui_runtime.snap_resolver"]["msg"].startswith("snap flick forced neighbor")
    assert by_logger["snapscroll.ui_runtime.snapping_layout"]["fields"]["candidates"] == 5
    assert by_logger["snapscroll.cli"]["fields"] == {"snapped": True, "observed": [3]}
