"""Domain models passed between the scaffolding stages."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD = "*"


class TemplateSource(BaseModel):
    """A template file accepted by the catalog."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Template file name, e.g. controller.mustache")
    path: Path = Field(..., description="Absolute template file path")


class TemplateData(BaseModel):
    """Raw template content split into front matter and body."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Template file name")
    path: Path = Field(..., description="Absolute template file path")
    body: str = Field(default="", description="Template body after the front matter")
    raw_metadata: str = Field(default="", description="Unparsed YAML front matter")
    overrides: dict[str, Any] = Field(
        default_factory=dict, description="Per-template overrides from the mode config"
    )


class ResolvedFileSpec(BaseModel):
    """Concrete, renderable description of one generated file."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(..., min_length=1)
    file_paths: list[str] = Field(..., min_length=1)
    file_extension: str = Field(..., min_length=1)
    disabled: bool = False
    engine: str = Field(..., min_length=1)
    placeholders: dict[str, Any] | None = None


class ResolvedTemplate(BaseModel):
    """Template data paired with its resolved file spec."""

    model_config = ConfigDict(frozen=True)

    data: TemplateData
    spec: ResolvedFileSpec


class TemplateContext(BaseModel):
    """Template settings resolved from the mode configuration."""

    model_config = ConfigDict(frozen=True)

    templates_path: Path
    engine_extensions: list[str] = Field(default_factory=list)
    templates: dict[str, Path] = Field(default_factory=dict)
    defaults: dict[str, Any] = Field(default_factory=dict)
    overrides: dict[str, Any] = Field(default_factory=dict)
    require_existing_dirs: bool = True


class UnitMapping(BaseModel):
    """How units fan out across component directories."""

    model_config = ConfigDict(frozen=True)

    mode: str = Field(..., description="Either 'units' or 'directories'")
    defaults_enabled: bool = False
    overrides: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("overrides", mode="before")
    @classmethod
    def _normalise_targets(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        normalised: dict[str, list[str]] = {}
        for key, targets in value.items():
            if targets is None:
                normalised[str(key)] = []
            elif isinstance(targets, str):
                normalised[str(key)] = [targets]
            else:
                normalised[str(key)] = [str(target) for target in targets]
        return normalised


class UnitContext(BaseModel):
    """Declared units and their directory mapping."""

    model_config = ConfigDict(frozen=True)

    units: list[str] = Field(default_factory=list)
    mapping: UnitMapping


class DirectoryContext(BaseModel):
    """Directories declared for the component."""

    model_config = ConfigDict(frozen=True)

    directories: list[str] = Field(default_factory=list)


class ComponentContext(BaseModel):
    """Name and root path of the component being scaffolded."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path


class CommandsContext(BaseModel):
    """Shell commands run before and after scaffolding."""

    model_config = ConfigDict(frozen=True)

    before: list[str] = Field(default_factory=list)
    after: list[str] = Field(default_factory=list)
