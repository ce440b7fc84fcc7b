"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_custom(value: str) -> tuple[str, str]:
    """Parse a config override in format KEY=VALUE (KEY in dot notation)."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key or any(not segment for segment in key.split(".")):
        raise typer.BadParameter(f"Invalid config key: {key!r}")
    return key, raw
