"""Pre- and post-scaffolding shell commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .core.config import ModeConfig
from .core.models import CommandsContext
from .core.report import RunReport

logger = logging.getLogger(__name__)

BEFORE = "pre-scaffolding"
AFTER = "post-scaffolding"


def _command_list(config: ModeConfig, dot_path: str, label: str) -> list[str]:
    raw = config.get(dot_path) or []
    if isinstance(raw, str):
        raw = [raw]
    commands = [str(command) for command in raw]
    if commands:
        logger.info(f"{label.capitalize()} commands provided: [{', '.join(commands)}]")
    else:
        logger.info(f"No {label} commands were provided")
    return commands


def resolve_commands_context(config: ModeConfig) -> CommandsContext:
    return CommandsContext(
        before=_command_list(config, "commands.before", BEFORE),
        after=_command_list(config, "commands.after", AFTER),
    )


def execute_commands(
    commands: Sequence[str],
    label: str,
    *,
    cwd: Path | None = None,
    report: RunReport | None = None,
) -> list[int]:
    """Run shell commands in order; a failing command does not stop the rest.

    Args:
        commands: Shell command lines
        label: Phase name used in log messages
        cwd: Working directory (process cwd when omitted)
        report: Optional run report recording failures

    Returns:
        Exit code of each command
    """
    logger.info(f"Executing {label} commands...")
    exit_codes: list[int] = []
    for command in commands:
        logger.info(f"Executing: '{command}'")
        try:
            result = subprocess.run(command, shell=True, cwd=cwd, check=False)
            returncode = result.returncode
        except OSError as exc:
            logger.error(f"Command could not be started: '{command}' ({exc})")
            returncode = -1
        exit_codes.append(returncode)
        if returncode != 0:
            logger.error(f"Command failed: '{command}' (exit code {returncode})")
            if report is not None:
                report.add_error("Commands", command, f"exit code {returncode}")
    logger.info(f"All {label} commands executed")
    return exit_codes
