"""Naming convention application for generated names."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Protocol

from .config import ModeConfig

logger = logging.getLogger(__name__)

StyleFunc = Callable[[str], str]


class NamingConvention(Protocol):
    def apply(self, section: str, key: str, value: str) -> str: ...


class IdentityNaming:
    """Leaves every name untouched."""

    def apply(self, section: str, key: str, value: str) -> str:
        return value


class SectionedNaming:
    """Applies configured styles per section, with per-key overrides.

    Styles for a section come from ``naming_conventions.<section>.defaults``
    unless ``naming_conventions.<section>.overrides.<key>`` names its own list.
    Values containing ``/`` are styled segment by segment.
    """

    def __init__(self, config: ModeConfig, styles: Mapping[str, StyleFunc]) -> None:
        self._config = config
        self._styles = dict(styles)

    def register_style(self, name: str, func: StyleFunc) -> None:
        self._styles[name] = func

    def _styles_for(self, section: str, key: str) -> list[str]:
        overrides = self._config.get(f"naming_conventions.{section}.overrides") or {}
        if isinstance(overrides, dict) and overrides.get(key) is not None:
            return list(overrides[key])
        return list(self._config.get(f"naming_conventions.{section}.defaults") or [])

    def _apply_styles(self, styles: list[str], value: str) -> str:
        for style in styles:
            func = self._styles.get(style)
            if func is None:
                logger.error(f"Unsupported naming convention: '{style}'")
                continue
            logger.debug(f"Applying naming convention '{style}' to '{value}'")
            value = func(value)
        return value

    def apply(self, section: str, key: str, value: str) -> str:
        styles = self._styles_for(section, key)
        if not styles:
            return value
        return "/".join(
            self._apply_styles(styles, segment) for segment in value.split("/")
        )


BUILTIN_STYLES: dict[str, StyleFunc] = {
    "lower_case": str.lower,
    "upper_case": str.upper,
    "title_case": str.title,
}
