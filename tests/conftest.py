"""Shared fixtures for the forgefoundry test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from forgefoundry.core.config import ModeConfig


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def write_template(templates_dir: Path) -> Callable[..., Path]:
    """Write a template file, optionally with YAML front matter."""

    def _write(name: str, body: str, metadata: str | None = None) -> Path:
        path = templates_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if metadata is None:
            path.write_text(body, encoding="utf-8")
        else:
            path.write_text(f"---\n{metadata}\n---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    path = tmp_path / "components"
    path.mkdir()
    return path


@pytest.fixture
def mode_data(templates_dir: Path, components_dir: Path) -> dict[str, Any]:
    return {
        "component_name": "Billing",
        "component_path": str(components_dir),
        "directories": ["Models", "Dtos", "Controllers"],
        "units": ["User"],
        "units_map": {
            "mode": "units",
            "units": {"units_created_by_default": False, "overrides": {"User": ["Models"]}},
        },
        "templates_path": str(templates_dir),
        "template_engine_extensions": ["mustache", "twig", "php"],
        "templates_require_existing_dirs": True,
        "templates": {
            "defaults": {"file_extension": "php", "file_paths": ["Dtos"]},
            "overrides": {},
        },
    }


@pytest.fixture
def mode_file(tmp_path: Path, mode_data: dict[str, Any]) -> Path:
    path = tmp_path / "mode.yaml"
    path.write_text(yaml.safe_dump(mode_data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def mode_config(mode_data: dict[str, Any], tmp_path: Path) -> ModeConfig:
    return ModeConfig(data=mode_data, base_dir=tmp_path)
