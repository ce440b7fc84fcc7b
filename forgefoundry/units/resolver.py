"""Unit to directory fan-out resolution."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..core.config import ModeConfig
from ..core.models import WILDCARD, UnitContext, UnitMapping

logger = logging.getLogger(__name__)

UNITS_MODE = "units"
DIRECTORIES_MODE = "directories"


def _format(items: Sequence[str]) -> str:
    return f"[{', '.join(items)}]" if items else "No directories"


def _units_mode(unit: str, overrides: Mapping[str, Sequence[str]]) -> list[str] | None:
    """Targets of a unit keyed override; ``None`` means every directory."""
    targets = overrides.get(unit)
    if targets is None:
        return []
    if list(targets) == [WILDCARD]:
        logger.info(f"'{unit}' accepts all directories")
        return None
    return list(targets)


def _directories_mode(unit: str, overrides: Mapping[str, Sequence[str]]) -> list[str]:
    directories: list[str] = []
    for directory, units in overrides.items():
        if not units:
            logger.debug(f"Directory '{directory}' has no units. skipping")
        elif list(units) == [WILDCARD]:
            logger.debug(f"Directory '{directory}' applies to all units")
            directories.append(directory)
        elif unit in units:
            logger.debug(f"Unit '{unit}' is included in directory '{directory}' override")
            directories.append(directory)
        else:
            logger.debug(f"Unit '{unit}' is not in directory '{directory}' override. skipping")
    return directories


def resolve_directories(
    unit: str,
    mode: str,
    overrides: Mapping[str, Sequence[str]],
    defaults_enabled: bool,
    all_directories: Sequence[str],
) -> list[str]:
    """Compute the directories a unit is materialized into.

    Args:
        unit: Unit name as declared in the mode config
        mode: ``units`` (overrides keyed by unit) or ``directories`` (keyed by directory)
        overrides: Override targets; ``["*"]`` means all
        defaults_enabled: Also add every directory without an override entry
        all_directories: Every directory of the component

    Returns:
        Directory names, overrides first, then defaults
    """
    if mode == UNITS_MODE:
        directories = _units_mode(unit, overrides)
        if directories is None:
            return list(all_directories)
    elif mode == DIRECTORIES_MODE:
        directories = _directories_mode(unit, overrides)
    else:
        logger.error(f"Unknown units map mode: '{mode}'")
        directories = []

    logger.info(f"Directories for unit '{unit}' after applying overrides: {_format(directories)}")

    # Applies to every unit, including ones with an explicit override
    if defaults_enabled:
        remaining = [d for d in all_directories if d not in overrides]
        directories.extend(remaining)
        logger.info(
            f"Default unit creation enabled, generating '{unit}' inside all "
            f"non-overridden directories: {_format(remaining)}"
        )

    return directories


def resolve_unit_context(config: ModeConfig) -> UnitContext:
    """Read units and their mapping from the mode config."""
    units = [str(unit) for unit in config.get("units") or []]
    logger.info(f"Provided units: [{', '.join(units)}]" if units else "No units provided")

    mode = str(config.get("units_map.mode") or UNITS_MODE)
    logger.info(f"Units map mode: '{mode}'")

    defaults_enabled = config.get(f"units_map.{mode}.units_created_by_default")
    if defaults_enabled is None:
        logger.warning("Units map defaults not provided; defaulting to false")
        defaults_enabled = False
    logger.info(
        "Units will be created by default."
        if defaults_enabled
        else "Units will not be created by default."
    )

    mapping = UnitMapping(
        mode=mode,
        defaults_enabled=bool(defaults_enabled),
        overrides=config.get(f"units_map.{mode}.overrides") or {},
    )
    _log_overrides(mapping)
    return UnitContext(units=units, mapping=mapping)


def _log_overrides(mapping: UnitMapping) -> None:
    source_label = "Unit" if mapping.mode == UNITS_MODE else "Directory"
    target_label = "Directories" if mapping.mode == UNITS_MODE else "Units"
    if not mapping.overrides:
        logger.info(f"No '{source_label}' overrides defined")
        return
    logger.info(f"Resolved '{source_label}' overrides:")
    for source, targets in mapping.overrides.items():
        if targets == [WILDCARD]:
            logger.info(f"  - '{source}': All {target_label}")
        elif not targets:
            logger.info(f"  - '{source}': No {target_label}")
        else:
            logger.info(f"  - '{source}': {', '.join(targets)}")
