"""End-to-end scaffolding run.

Stages run in a fixed order (before-commands, component, directories, units,
templates, after-commands) and exchange their resolved contexts through a
per-run ContextBus.
"""

from __future__ import annotations

import logging

from .commands import AFTER, BEFORE, execute_commands, resolve_commands_context
from .components import generate_component, resolve_component
from .core.config import ModeConfig, system_enabled
from .core.context import ContextBus
from .core.models import (
    CommandsContext,
    ComponentContext,
    DirectoryContext,
    TemplateContext,
    UnitContext,
)
from .core.naming import IdentityNaming, NamingConvention
from .core.report import RunReport
from .core.settings import ForgeSettings
from .directories import generate_directories, resolve_directory_context
from .rendering.engine import EngineRegistry, default_registry
from .templates.generator import generate_templates
from .templates.resolver import resolve_template_context, resolve_templates
from .units.generator import generate_units
from .units.resolver import resolve_unit_context

logger = logging.getLogger(__name__)


def _run_commands_before(config: ModeConfig, bus: ContextBus, report: RunReport) -> None:
    if not system_enabled(config, "commands"):
        logger.warning("Commands system is disabled")
        return
    context = resolve_commands_context(config)
    bus.publish(CommandsContext, context)
    if context.before:
        execute_commands(context.before, BEFORE, report=report)


def _run_commands_after(config: ModeConfig, bus: ContextBus, report: RunReport) -> None:
    if not system_enabled(config, "commands"):
        return
    context = bus.get(CommandsContext)
    if context.after:
        execute_commands(context.after, AFTER, report=report)


def _run_component(
    config: ModeConfig, bus: ContextBus, naming: NamingConvention, settings: ForgeSettings
) -> None:
    component = resolve_component(config, naming)
    bus.publish(ComponentContext, component)
    generate_component(component, settings.marker_file_name)


def _run_directories(
    config: ModeConfig, bus: ContextBus, naming: NamingConvention, report: RunReport
) -> None:
    if not system_enabled(config, "directories"):
        logger.warning("Directories system is disabled")
        return
    context = resolve_directory_context(config)
    bus.publish(DirectoryContext, context)
    generate_directories(context, bus.get(ComponentContext), naming=naming, report=report)


def _run_units(
    config: ModeConfig,
    bus: ContextBus,
    naming: NamingConvention,
    settings: ForgeSettings,
    report: RunReport,
) -> None:
    if not system_enabled(config, "units"):
        logger.warning("Units system is disabled")
        return
    if not system_enabled(config, "directories"):
        logger.warning("Directories system is disabled therefore units system cant be ran")
        return
    context = resolve_unit_context(config)
    bus.publish(UnitContext, context)
    generate_units(
        context,
        bus.get(DirectoryContext),
        bus.get(ComponentContext),
        naming=naming,
        marker_file_name=settings.marker_file_name,
        report=report,
    )


def _run_templates(
    config: ModeConfig,
    bus: ContextBus,
    naming: NamingConvention,
    registry: EngineRegistry,
    report: RunReport,
) -> None:
    if not system_enabled(config, "templates"):
        logger.warning("Templates system is disabled")
        return
    context = resolve_template_context(config, report)
    bus.publish(TemplateContext, context)
    templates = resolve_templates(context, registry, report)
    generate_templates(
        templates,
        context,
        bus.get(ComponentContext),
        registry=registry,
        naming=naming,
        report=report,
    )


def run(
    config: ModeConfig,
    *,
    naming: NamingConvention | None = None,
    registry: EngineRegistry | None = None,
    settings: ForgeSettings | None = None,
) -> RunReport:
    """Scaffold one component from a mode configuration.

    Args:
        config: Mode configuration
        naming: Naming convention for generated names (identity when omitted)
        registry: Template engines (built-in engines when omitted)
        settings: Environment settings

    Returns:
        Report of generated, skipped and errored entries
    """
    if naming is None or not system_enabled(config, "naming_conventions"):
        naming = IdentityNaming()
    registry = registry or default_registry()
    settings = settings or ForgeSettings()
    report = RunReport()
    bus = ContextBus()

    logger.info("Scaffolding started")
    _run_commands_before(config, bus, report)
    _run_component(config, bus, naming, settings)
    _run_directories(config, bus, naming, report)
    _run_units(config, bus, naming, settings, report)
    _run_templates(config, bus, naming, registry, report)
    _run_commands_after(config, bus, report)
    logger.info("Scaffolding finished")
    return report
