"""Rendered file generation."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import SkippablePathError, SkippableTemplateError
from ..core.models import ComponentContext, ResolvedTemplate, TemplateContext
from ..core.naming import IdentityNaming, NamingConvention
from ..core.report import RunReport
from ..rendering import engine as engines
from ..rendering.io import atomic_write_text, make_directory

logger = logging.getLogger(__name__)


def target_directory(component_root: Path, entry: str, require_existing: bool) -> Path:
    """Return the directory a file entry points at, creating it if allowed.

    Raises:
        SkippablePathError: If the directory is missing and must already exist
    """
    directory = component_root / entry
    if directory.is_dir():
        return directory
    if require_existing:
        raise SkippablePathError(directory, "directory does not exist")
    make_directory(directory)
    logger.info(f"Creating path '{directory}'")
    return directory


def write_file(
    template: ResolvedTemplate,
    content: str | None,
    component_root: Path,
    *,
    require_existing_dirs: bool = True,
    naming: NamingConvention | None = None,
    report: RunReport | None = None,
) -> list[Path]:
    """Write rendered content to every path of a resolved template.

    Args:
        template: Resolved template data and file spec
        content: Rendered content; ``None`` skips the file
        component_root: Root directory of the component
        require_existing_dirs: Drop paths whose directory does not exist
        naming: Naming convention applied to the file name
        report: Optional run report

    Returns:
        Paths that were written
    """
    name = template.data.name
    spec = template.spec

    if spec.disabled:
        logger.warning(f"Skipping disabled template: '{name}'")
        if report is not None:
            report.add_skipped("Files", name, "disabled")
        return []

    if content is None:
        logger.warning(f"'{name}' template's content is empty. Skipping")
        if report is not None:
            report.add_skipped("Files", name, "no rendered content")
        return []

    naming = naming or IdentityNaming()
    file_name = f"{naming.apply('templates', name, spec.file_name)}.{spec.file_extension}"

    targets: list[Path] = []
    for entry in spec.file_paths:
        try:
            directory = target_directory(component_root, entry, require_existing_dirs)
        except SkippablePathError as exc:
            logger.error(
                f"Path '{exc.path}' does not exist; skipping generating file "
                f"'{file_name}' in that directory"
            )
            if report is not None:
                report.add_error("Paths", str(exc.path), exc.reason)
            continue
        targets.append(directory / file_name)

    if not targets:
        raise SkippableTemplateError(name, f"file '{file_name}' has no valid paths")

    for target in targets:
        atomic_write_text(target, content)
        logger.info(f"File generated: '{file_name}' from template '{name}' at '{target}'")
        if report is not None:
            report.add_created("Files", str(target))
    return targets


def generate_templates(
    templates: list[ResolvedTemplate],
    template_context: TemplateContext,
    component: ComponentContext,
    *,
    registry: engines.EngineRegistry | None = None,
    naming: NamingConvention | None = None,
    report: RunReport | None = None,
) -> list[Path]:
    """Render and write every resolved template in order."""
    registry = registry or engines.default_registry()
    written: list[Path] = []
    for template in templates:
        spec = template.spec
        content = None
        if not spec.disabled:
            content = engines.render(
                spec.placeholders, template.data.body, spec.engine, registry
            )
        try:
            written.extend(
                write_file(
                    template,
                    content,
                    component.path,
                    require_existing_dirs=template_context.require_existing_dirs,
                    naming=naming,
                    report=report,
                )
            )
        except SkippableTemplateError as exc:
            logger.error(str(exc))
            if report is not None:
                report.add_error("Files", exc.template_name, exc.reason)
    return written
