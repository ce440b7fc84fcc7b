"""Template rendering engines.

Each engine is a strategy exposing ``render(body, placeholders)``. Engines are
looked up by the id detected from the template file name, so adding an engine
means registering a new strategy under its id.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Protocol

import chevron
from jinja2 import Environment, StrictUndefined
from mako.template import Template as MakoTemplate

logger = logging.getLogger(__name__)

MUSTACHE = "mustache"
TWIG = "twig"
BLADE = "blade.php"


class Renderer(Protocol):
    def render(self, body: str, placeholders: Mapping[str, Any]) -> str: ...


class MustacheRenderer:
    """Logic-less Mustache substitution."""

    def render(self, body: str, placeholders: Mapping[str, Any]) -> str:
        return chevron.render(body, dict(placeholders))


class TwigRenderer:
    """Twig-style expression templating backed by Jinja2."""

    def __init__(self) -> None:
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, body: str, placeholders: Mapping[str, Any]) -> str:
        return self._env.from_string(body).render(**placeholders)


class BladeRenderer:
    """Code-embedding templates (``${expr}``, ``% if``, ``<% %>``) via Mako."""

    def render(self, body: str, placeholders: Mapping[str, Any]) -> str:
        return MakoTemplate(body, strict_undefined=True).render(**placeholders)


class EngineRegistry:
    """Name to renderer mapping."""

    def __init__(self, engines: Mapping[str, Renderer] | None = None) -> None:
        self._engines: dict[str, Renderer] = dict(engines or {})

    def register(self, name: str, renderer: Renderer) -> None:
        self._engines[name] = renderer
        logger.debug(f"Registered template engine: '{name}'")

    def get(self, name: str) -> Renderer | None:
        return self._engines.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    def __iter__(self) -> Iterator[str]:
        return iter(self._engines)


def default_registry() -> EngineRegistry:
    """Registry with the built-in Mustache, Twig and Blade engines."""
    return EngineRegistry(
        {
            MUSTACHE: MustacheRenderer(),
            TWIG: TwigRenderer(),
            BLADE: BladeRenderer(),
        }
    )


def render(
    placeholders: Mapping[str, Any] | None,
    body: str,
    engine: str,
    registry: EngineRegistry | None = None,
) -> str | None:
    """Render a template body with the named engine.

    Args:
        placeholders: Values to substitute; ``None`` returns the body verbatim
        body: Template body
        engine: Engine id, e.g. ``mustache``
        registry: Engines to choose from (defaults to the built-in set)

    Returns:
        Rendered text, or ``None`` if the engine is unknown or rendering failed
    """
    if placeholders is None:
        return body

    registry = registry or default_registry()
    renderer = registry.get(engine)
    if renderer is None:
        logger.error(f"Unsupported template engine: '{engine}'")
        return None

    context = {str(key): value for key, value in placeholders.items()}
    try:
        return renderer.render(body, context)
    except Exception as exc:
        logger.error(f"Template engine '{engine}' failed to render: {exc}")
        return None
