"""Component root resolution and creation."""

from __future__ import annotations

import logging

from .core.config import ModeConfig
from .core.errors import FatalWiringError
from .core.models import ComponentContext
from .core.naming import IdentityNaming, NamingConvention
from .rendering.io import atomic_write_text, make_directory

logger = logging.getLogger(__name__)


def resolve_component(
    config: ModeConfig, naming: NamingConvention | None = None
) -> ComponentContext:
    """Resolve the component name and its absolute root path.

    Raises:
        FatalWiringError: If the name or base path is not configured
    """
    name = config.get("component_name")
    if not name:
        raise FatalWiringError("No component name configured ('component_name')")
    naming = naming or IdentityNaming()
    name = naming.apply("component", str(name), str(name))
    logger.info(f"Component name: '{name}'")

    base_path = config.resolve_path("component_path")
    if base_path is None:
        raise FatalWiringError("No component path configured ('component_path')")
    path = base_path / name
    logger.info(f"Component path: '{path}'")
    return ComponentContext(name=name, path=path)


def generate_component(context: ComponentContext, marker_file_name: str = ".gitkeep") -> None:
    """Create the component root.

    Raises:
        FatalWiringError: If the component already exists
    """
    if context.path.exists():
        raise FatalWiringError(f"Component: '{context.path}' already exists")
    make_directory(context.path)
    atomic_write_text(context.path / marker_file_name, "")
    logger.info(f"Generated component: '{context.path}'")
