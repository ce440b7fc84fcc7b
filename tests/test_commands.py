from __future__ import annotations

import logging
from pathlib import Path

from forgefoundry.commands import AFTER, BEFORE, execute_commands, resolve_commands_context
from forgefoundry.core.config import ModeConfig
from forgefoundry.core.report import RunReport


def test_resolve_commands_context(caplog):
    config = ModeConfig(data={"commands": {"before": ["echo start"], "after": "echo done"}})
    with caplog.at_level(logging.INFO):
        context = resolve_commands_context(config)

    assert context.before == ["echo start"]
    assert context.after == ["echo done"]
    assert "Pre-scaffolding commands provided: [echo start]" in caplog.text


def test_missing_commands_are_empty(caplog):
    with caplog.at_level(logging.INFO):
        context = resolve_commands_context(ModeConfig(data={}))

    assert context.before == []
    assert context.after == []
    assert "No post-scaffolding commands were provided" in caplog.text


def test_commands_run_in_order(tmp_path: Path):
    commands = ["echo one > log.txt", "echo two >> log.txt"]
    assert execute_commands(commands, BEFORE, cwd=tmp_path) == [0, 0]
    assert (tmp_path / "log.txt").read_text().split() == ["one", "two"]


def test_failing_command_does_not_stop_the_rest(tmp_path: Path, caplog):
    report = RunReport()
    with caplog.at_level(logging.INFO):
        codes = execute_commands(["exit 3", "touch marker"], AFTER, cwd=tmp_path, report=report)

    assert codes == [3, 0]
    assert (tmp_path / "marker").exists()
    assert "Command failed: 'exit 3' (exit code 3)" in caplog.text
    assert "All post-scaffolding commands executed" in caplog.text
    assert [(e.kind, e.name, e.reason) for e in report.errors] == [
        ("Commands", "exit 3", "exit code 3")
    ]
