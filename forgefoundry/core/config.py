"""Mode configuration loading and dot-path lookup."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError

logger = logging.getLogger(__name__)


class ModeConfig(BaseModel):
    """Immutable view over a parsed mode configuration document."""

    model_config = ConfigDict(frozen=True)

    data: dict[str, Any] = Field(default_factory=dict)
    base_dir: Path = Field(
        default_factory=Path.cwd, description="Directory relative paths resolve against"
    )

    def get(self, dot_path: str, default: Any = None) -> Any:
        """Look up a nested value using dot notation.

        Args:
            dot_path: Key path such as ``units_map.mode``
            default: Value returned when any segment is missing

        Returns:
            The stored value, or ``default``
        """
        value: Any = self.data
        for segment in dot_path.split("."):
            if not isinstance(value, dict) or segment not in value:
                return default
            value = value[segment]
        return value

    def resolve_path(self, dot_path: str) -> Path | None:
        """Return a configured path made absolute against ``base_dir``."""
        raw = self.get(dot_path)
        if raw is None or raw == "":
            return None
        path = Path(str(raw)).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path.resolve()

    def with_overrides(self, pairs: Iterable[tuple[str, str]]) -> ModeConfig:
        """Return a new config with ``key=value`` overrides applied.

        Values are parsed as YAML scalars so ``true`` and ``3`` keep their type.
        """
        data = copy.deepcopy(self.data)
        for dot_path, raw_value in pairs:
            value = yaml.safe_load(raw_value) if raw_value != "" else ""
            target = data
            segments = dot_path.split(".")
            for segment in segments[:-1]:
                child = target.get(segment)
                if not isinstance(child, dict):
                    child = {}
                    target[segment] = child
                target = child
            target[segments[-1]] = value
            logger.debug(f"Config override applied: {dot_path}={value!r}")
        return ModeConfig(data=data, base_dir=self.base_dir)


def load_mode_config(path: Path) -> ModeConfig:
    """Load a mode configuration from a YAML file.

    Args:
        path: Path to the mode YAML file

    Returns:
        ModeConfig rooted at the file's directory
    """
    if not path.exists():
        raise ConfigError(f"Mode config not found at {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Mode config {path} must be a mapping")

    logger.info(f"Loaded mode config: {path}")
    return ModeConfig(data=data, base_dir=path.resolve().parent)


def system_enabled(config: ModeConfig, system: str) -> bool:
    """Return whether a scaffolding system is switched on (default: on)."""
    value = config.get(f"{system}_enabled")
    return True if value is None else bool(value)
