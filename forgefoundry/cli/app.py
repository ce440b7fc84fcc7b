"""Main CLI application."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

import typer
from typing_extensions import Annotated

from .. import pipeline
from ..core.config import ModeConfig, load_mode_config
from ..core.errors import ForgeError
from ..core.naming import BUILTIN_STYLES, SectionedNaming
from ..core.report import RunReport
from ..core.settings import ForgeSettings
from .parsers import parse_custom

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="forgefoundry",
    help="Scaffold components from a YAML mode and annotated templates.",
)

ModeFile = Annotated[
    Path,
    typer.Argument(help="Mode configuration YAML file.", metavar="MODE_FILE"),
]
Customs = Annotated[
    list[str],
    typer.Option(
        "--set",
        help="Override a mode config value (format: KEY=VALUE, dot notation). Repeatable.",
        metavar="KEY=VALUE",
    ),
]
Verbose = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]


def _configure_logging(verbose: bool, settings: ForgeSettings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load(mode_file: Path, customs: list[str]) -> ModeConfig:
    config = load_mode_config(mode_file)
    return config.with_overrides(parse_custom(value) for value in customs)


def _execute(config: ModeConfig, settings: ForgeSettings) -> RunReport:
    naming = SectionedNaming(config, BUILTIN_STYLES)
    try:
        return pipeline.run(config, naming=naming, settings=settings)
    except ForgeError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _echo_report(report: RunReport) -> None:
    for line in report.summary_lines():
        typer.echo(line)


def render_tree(root: Path) -> list[str]:
    """Render a directory tree as indented lines, directories first."""
    lines = [f"{root.name}/"]

    def walk(directory: Path, depth: int) -> None:
        entries = sorted(directory.iterdir(), key=lambda p: (not p.is_dir(), p.name))
        for entry in entries:
            indent = "    " * depth
            if entry.is_dir():
                lines.append(f"{indent}{entry.name}/")
                walk(entry, depth + 1)
            else:
                lines.append(f"{indent}{entry.name}")

    walk(root, 1)
    return lines


@app.command()
def generate(
    mode_file: ModeFile,
    customs: Customs = [],
    verbose: Verbose = False,
) -> None:
    """Generate a component from MODE_FILE."""
    settings = ForgeSettings()
    _configure_logging(verbose, settings)
    try:
        config = _load(mode_file, customs)
    except ForgeError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    report = _execute(config, settings)
    name = config.get("component_name")
    typer.secho(f"'{name}' Scaffolded Successfully!", fg=typer.colors.GREEN)
    _echo_report(report)


@app.command("dry-run")
def dry_run(
    mode_file: ModeFile,
    customs: Customs = [],
    verbose: Verbose = False,
) -> None:
    """Generate into a temporary directory, print the tree, then discard it."""
    settings = ForgeSettings()
    _configure_logging(verbose, settings)
    try:
        config = _load(mode_file, customs)
    except ForgeError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    temp_root = Path(tempfile.mkdtemp(prefix="forge_dry_run_"))
    try:
        config = config.with_overrides(
            [("component_path", str(temp_root)), ("commands_enabled", "false")]
        )
        report = _execute(config, settings)
        for child in sorted(temp_root.iterdir()):
            for line in render_tree(child):
                typer.echo(line)
        _echo_report(report)
    finally:
        shutil.rmtree(temp_root, ignore_errors=True)
        logger.debug(f"Removed dry run directory: {temp_root}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
