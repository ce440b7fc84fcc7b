"""Template data and file spec resolution.

A template's file spec is merged from three sources, highest precedence first:
the per-template override in the mode config, the template's own front matter,
and the global template defaults.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml
from chevron.tokenizer import ChevronError

from ..core.config import ModeConfig
from ..core.errors import FatalWiringError, SkippableTemplateError
from ..core.models import ResolvedFileSpec, ResolvedTemplate, TemplateContext, TemplateData
from ..core.report import RunReport
from ..rendering import engine as engines
from .catalog import discover

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"^---\s*(.*?)\s*---\s*(.*)$", re.DOTALL)

UNKNOWN_ENGINE = "unknown"

REQUIRED_FIELDS = ("file_name", "file_paths", "file_extension", "engine")


def split_front_matter(contents: str) -> tuple[str, str]:
    """Split raw template contents into ``(metadata, body)``."""
    match = FRONT_MATTER_PATTERN.match(contents)
    if match is None:
        return "", contents
    return match.group(1), match.group(2)


def resolve_template_data(
    path: Path, name: str, overrides_by_name: Mapping[str, Any]
) -> TemplateData:
    """Read a template file and attach its overrides.

    Args:
        path: Template file path
        name: Template file name, used as the override key
        overrides_by_name: All template overrides from the mode config

    Returns:
        TemplateData with metadata and body split from the file
    """
    contents = path.read_text(encoding="utf-8")
    metadata, body = split_front_matter(contents)

    overrides = overrides_by_name.get(name) or {}
    if not isinstance(overrides, dict):
        logger.warning(f"Overrides for template '{name}' are not a mapping; ignoring")
        overrides = {}

    data = TemplateData(
        name=name, path=path, body=body, raw_metadata=metadata, overrides=overrides
    )
    logger.debug(
        f"Resolved file data for template '{name}': path={path}, "
        f"metadata={'yes' if metadata else 'none'}, overrides={sorted(overrides)}"
    )
    return data


def detect_engine(name: str, known_engines: Iterable[str] | None = None) -> str:
    """Derive the render engine id from a template file name.

    A registered engine id that ends the name wins (``a.b.mustache`` ->
    ``mustache``, ``view.blade.php`` -> ``blade.php``); otherwise everything
    after the first dot is used, and a name without a dot is ``unknown``.
    """
    if known_engines is None:
        known_engines = engines.default_registry()
    for engine in sorted(known_engines, key=len, reverse=True):
        if name.endswith(f".{engine}"):
            return engine
    _, dot, rest = name.partition(".")
    return rest if dot else UNKNOWN_ENGINE


def _parse_yaml_mapping(text: str, template_name: str) -> dict[str, Any]:
    try:
        parsed = yaml.safe_load(text) if text else None
    except yaml.YAMLError as exc:
        raise SkippableTemplateError(template_name, f"invalid front matter: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise SkippableTemplateError(template_name, "front matter is not a mapping")
    return parsed


def merge_placeholders(
    overrides: Mapping[str, Any],
    metadata: Mapping[str, Any],
    defaults: Mapping[str, Any],
    template_name: str = "",
) -> dict[str, Any] | None:
    """Union placeholder sources where the first source to set a key wins.

    Returns:
        Merged placeholders, or ``None`` when every source is empty

    Raises:
        SkippableTemplateError: If override or default placeholders are not a mapping
    """
    sources = []
    for label, source in (
        ("override", overrides.get("placeholders")),
        ("metadata", metadata),
        ("default", defaults.get("placeholders")),
    ):
        if source is None:
            continue
        if not isinstance(source, Mapping):
            raise SkippableTemplateError(
                template_name, f"{label} placeholders must be a mapping"
            )
        sources.append(source)

    merged: dict[str, Any] = {}
    for source in sources:
        for key, value in source.items():
            merged.setdefault(key, value)
    return merged or None


def _first_non_null(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or value == []


def build_file_spec(
    data: TemplateData,
    defaults: Mapping[str, Any],
    known_engines: Iterable[str] | None = None,
) -> ResolvedFileSpec:
    """Merge override, front matter and defaults into a file spec.

    Raises:
        SkippableTemplateError: If a required field cannot be resolved
    """
    template_engine = detect_engine(data.name, known_engines)

    try:
        raw_metadata = _parse_yaml_mapping(data.raw_metadata, data.name)
    except SkippableTemplateError as exc:
        # Unrendered front matter may only become valid YAML after substitution
        logger.warning(f"{exc}; front matter not used as placeholders")
        raw_metadata = {}
    placeholders = merge_placeholders(data.overrides, raw_metadata, defaults, data.name)

    # Front matter may itself reference placeholders, e.g. file_name: "{{entity}}Dto"
    try:
        rerendered = engines.MustacheRenderer().render(data.raw_metadata, placeholders or {})
    except ChevronError as exc:
        raise SkippableTemplateError(data.name, f"invalid front matter template: {exc}") from exc
    metadata = _parse_yaml_mapping(rerendered, data.name)

    overrides = data.overrides
    fields: dict[str, Any] = {
        name: _first_non_null(overrides.get(name), metadata.get(name), defaults.get(name))
        for name in ("file_name", "file_paths", "file_extension")
    }
    if isinstance(fields["file_paths"], str):
        fields["file_paths"] = [fields["file_paths"]]
    fields["engine"] = template_engine

    disabled = any(
        bool(source.get("file_disabled", False))
        for source in (overrides, metadata, defaults)
    )

    missing = [name for name in REQUIRED_FIELDS if _is_missing(fields[name])]
    if missing:
        raise SkippableTemplateError(data.name, f"missing {', '.join(missing)}")

    if placeholders is None:
        logger.warning(f"Template '{data.name}' does not provide placeholders")

    return ResolvedFileSpec(
        file_name=str(fields["file_name"]),
        file_paths=[str(path) for path in fields["file_paths"]],
        file_extension=str(fields["file_extension"]),
        disabled=disabled,
        engine=template_engine,
        placeholders=(
            {str(key): value for key, value in placeholders.items()} if placeholders else None
        ),
    )


def resolve_file_spec(
    data: TemplateData,
    defaults: Mapping[str, Any],
    known_engines: Iterable[str] | None = None,
) -> ResolvedFileSpec | None:
    """Resolve a file spec, returning ``None`` when the template is unusable."""
    try:
        spec = build_file_spec(data, defaults, known_engines)
    except SkippableTemplateError as exc:
        logger.error(f"'{data.name}' does not have valid file data: {exc.reason}")
        return None

    logger.debug(
        f"Resolved template data for '{data.name}': name={spec.file_name}, "
        f"paths={spec.file_paths}, extension={spec.file_extension}, "
        f"disabled={spec.disabled}, engine={spec.engine}"
    )
    return spec


def resolve_template_context(
    config: ModeConfig, report: RunReport | None = None
) -> TemplateContext:
    """Read template settings from the mode config and discover templates."""
    templates_path = config.resolve_path("templates_path")
    if templates_path is None:
        raise FatalWiringError("No templates path configured ('templates_path')")
    logger.info(f"Templates path: '{templates_path}'")

    extensions = [str(ext) for ext in config.get("template_engine_extensions") or []]
    if extensions:
        logger.info(f"Template engine extensions available: [{', '.join(extensions)}]")
    else:
        logger.info("No template engine extensions available")

    templates = discover(templates_path, extensions, report)

    defaults = config.get("templates.defaults") or {}
    overrides = config.get("templates.overrides") or {}
    if not defaults:
        logger.info("No defaults defined")
    if not overrides:
        logger.info("No overrides defined")

    require_existing_dirs = bool(config.get("templates_require_existing_dirs", True))
    logger.info(
        "Templates require existing directories"
        if require_existing_dirs
        else "Templates create missing directories"
    )

    return TemplateContext(
        templates_path=templates_path,
        engine_extensions=extensions,
        templates=templates,
        defaults=defaults,
        overrides=overrides,
        require_existing_dirs=require_existing_dirs,
    )


def resolve_templates(
    context: TemplateContext,
    known_engines: Iterable[str] | None = None,
    report: RunReport | None = None,
) -> list[ResolvedTemplate]:
    """Resolve every catalogued template, dropping those without a valid spec."""
    known = list(known_engines) if known_engines is not None else None
    resolved: list[ResolvedTemplate] = []
    for name, path in context.templates.items():
        logger.debug(f"Resolving template '{name}'")
        try:
            data = resolve_template_data(path, name, context.overrides)
        except (UnicodeDecodeError, OSError) as exc:
            logger.error(f"Template '{name}' could not be read: {exc}")
            if report is not None:
                report.add_error("Files", name, "unreadable template")
            continue
        spec = resolve_file_spec(data, context.defaults, known)
        if spec is None:
            if report is not None:
                report.add_error("Files", name, "invalid file data")
            continue
        resolved.append(ResolvedTemplate(data=data, spec=spec))
    return resolved
