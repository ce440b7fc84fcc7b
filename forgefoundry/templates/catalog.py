"""Template catalog discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..core.errors import FatalWiringError
from ..core.models import TemplateSource
from ..core.report import RunReport
from ..rendering.io import all_files_recursive

logger = logging.getLogger(__name__)


def file_extension(name: str) -> str:
    """Return the final extension of a file name without the dot."""
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def discover(
    templates_path: Path,
    allowed_extensions: Iterable[str],
    report: RunReport | None = None,
) -> dict[str, Path]:
    """Collect template files whose extension is an accepted engine extension.

    Args:
        templates_path: Directory scanned recursively
        allowed_extensions: Final file extensions that count as templates
        report: Optional run report recording rejected files

    Returns:
        Mapping of template file name to absolute path, in enumeration order
    """
    if not templates_path.is_dir():
        raise FatalWiringError(f"Templates path does not exist: {templates_path}")

    allowed = list(allowed_extensions)
    accepted = f"[{', '.join(allowed)}]" if allowed else "No template engine extensions"

    templates: dict[str, Path] = {}
    for file_path in all_files_recursive(templates_path):
        source = TemplateSource(name=file_path.name, path=file_path.resolve())
        extension = file_extension(source.name)
        if extension not in allowed:
            logger.error(
                f"'{extension}' is not an accepted template engine. "
                f"Accepted template engine extensions: {accepted}"
            )
            if report is not None:
                report.add_skipped("Templates", source.name, "extension not accepted")
            continue
        if source.name in templates:
            logger.warning(
                f"Template '{source.name}' at '{source.path}' replaces the one at "
                f"'{templates[source.name]}'"
            )
        templates[source.name] = source.path

    if templates:
        logger.info(f"Provided templates: [{', '.join(templates)}]")
    else:
        logger.info("No templates were provided")
    return templates
