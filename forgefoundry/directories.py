"""Component directory resolution and generation."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.config import ModeConfig
from .core.models import ComponentContext, DirectoryContext
from .core.naming import IdentityNaming, NamingConvention
from .core.report import RunReport
from .rendering.io import make_directory

logger = logging.getLogger(__name__)


def resolve_directory_context(config: ModeConfig) -> DirectoryContext:
    directories = [str(d) for d in config.get("directories") or []]
    if directories:
        logger.info(f"Provided directories: [{', '.join(directories)}]")
    else:
        logger.info("No directories were provided")
    return DirectoryContext(directories=directories)


def generate_directories(
    context: DirectoryContext,
    component: ComponentContext,
    *,
    naming: NamingConvention | None = None,
    report: RunReport | None = None,
) -> list[Path]:
    """Create every configured directory under the component root."""
    naming = naming or IdentityNaming()
    created: list[Path] = []
    for directory in context.directories:
        path = component.path / naming.apply("directories", directory, directory)
        if path.exists():
            logger.debug(f"Directory already exists: '{path}'")
            continue
        logger.info(f"Creating Directory: '{path}'")
        make_directory(path)
        created.append(path)
        if report is not None:
            report.add_created("Directories", str(path))
    return created
