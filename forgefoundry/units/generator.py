"""Unit marker folder generation."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models import ComponentContext, DirectoryContext, UnitContext
from ..core.naming import IdentityNaming, NamingConvention
from ..core.report import RunReport
from ..rendering.io import atomic_write_text, make_directory
from .resolver import resolve_directories

logger = logging.getLogger(__name__)

DEFAULT_MARKER = ".gitkeep"


def create_unit(path: Path, marker_file_name: str = DEFAULT_MARKER) -> bool:
    """Create a unit folder with a marker file.

    Returns:
        False if the unit already existed and was left untouched
    """
    if path.exists():
        logger.info(f"Unit already exists at '{path}', skipping creation")
        return False
    logger.info(f"Creating unit at path: '{path}'")
    make_directory(path)
    atomic_write_text(path / marker_file_name, "")
    return True


def generate_units(
    unit_context: UnitContext,
    directory_context: DirectoryContext,
    component: ComponentContext,
    *,
    naming: NamingConvention | None = None,
    marker_file_name: str = DEFAULT_MARKER,
    report: RunReport | None = None,
) -> list[Path]:
    """Materialize every declared unit into its resolved directories."""
    if not unit_context.units:
        logger.info("No units specified, skipping unit generation")
        return []

    naming = naming or IdentityNaming()
    mapping = unit_context.mapping
    created: list[Path] = []
    for unit in unit_context.units:
        logger.info(f"Generating unit: '{unit}'")
        directories = resolve_directories(
            unit,
            mapping.mode,
            mapping.overrides,
            mapping.defaults_enabled,
            directory_context.directories,
        )
        styled = naming.apply("units", unit, unit)
        for directory in directories:
            path = component.path / directory / styled
            if create_unit(path, marker_file_name):
                created.append(path)
                if report is not None:
                    report.add_created("Units", str(path))
            elif report is not None:
                report.add_skipped("Units", str(path), "already exists")
    return created
