"""Error taxonomy for a scaffolding run.

Skippable errors are recovered by the stage that raised them: the template
or path is dropped and the run continues. Fatal errors abort the run.
"""

from __future__ import annotations

from pathlib import Path


class ForgeError(Exception):
    """Base class for all scaffolding errors."""


class ConfigError(ForgeError):
    """Raised when a mode configuration cannot be loaded."""


class FatalWiringError(ForgeError):
    """Raised when a stage is missing context it cannot run without."""


class SkippableTemplateError(ForgeError):
    """Raised when a single template cannot be generated."""

    def __init__(self, template_name: str, reason: str) -> None:
        super().__init__(f"Template '{template_name}': {reason}")
        self.template_name = template_name
        self.reason = reason


class SkippablePathError(ForgeError):
    """Raised when one output directory of a template is unusable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Path '{path}': {reason}")
        self.path = path
        self.reason = reason
