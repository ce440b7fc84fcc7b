from __future__ import annotations

import logging
from pathlib import Path

import pytest

from forgefoundry.core.config import ModeConfig
from forgefoundry.core.errors import SkippableTemplateError
from forgefoundry.core.models import (
    ComponentContext,
    ResolvedFileSpec,
    ResolvedTemplate,
    TemplateContext,
    TemplateData,
)
from forgefoundry.core.naming import SectionedNaming
from forgefoundry.core.report import RunReport
from forgefoundry.templates.generator import generate_templates, write_file


def make_template(name: str = "dto.mustache", **spec_fields) -> ResolvedTemplate:
    fields = {
        "file_name": "UserDto",
        "file_paths": ["Dtos"],
        "file_extension": "php",
        "engine": "mustache",
        "placeholders": {"entity": "User"},
    }
    fields.update(spec_fields)
    return ResolvedTemplate(
        data=TemplateData(name=name, path=Path(name), body="class {{entity}}Dto {}"),
        spec=ResolvedFileSpec(**fields),
    )


@pytest.fixture
def root(tmp_path: Path) -> Path:
    path = tmp_path / "Billing"
    (path / "Dtos").mkdir(parents=True)
    return path


class TestWriteFile:
    def test_writes_content(self, root: Path):
        written = write_file(make_template(), "content", root)
        assert written == [root / "Dtos" / "UserDto.php"]
        assert written[0].read_text() == "content"

    def test_same_content_to_every_path(self, root: Path):
        (root / "Api").mkdir()
        template = make_template(file_paths=["Dtos", "Api"])
        written = write_file(template, "same", root)
        assert [p.read_text() for p in written] == ["same", "same"]

    def test_missing_directory_is_skipped_when_required(self, root: Path, caplog):
        template = make_template(file_paths=["Dtos", "Missing"])
        report = RunReport()
        with caplog.at_level(logging.ERROR):
            written = write_file(template, "x", root, report=report)
        assert written == [root / "Dtos" / "UserDto.php"]
        assert not (root / "Missing").exists()
        assert "does not exist" in caplog.text
        assert report.errors[0].kind == "Paths"

    def test_no_writable_paths_skips_file(self, root: Path):
        template = make_template(file_paths=["Missing"])
        with pytest.raises(SkippableTemplateError):
            write_file(template, "x", root)

    def test_missing_directory_created_when_allowed(self, root: Path):
        template = make_template(file_paths=["Http/Requests"])
        written = write_file(template, "x", root, require_existing_dirs=False)
        assert written == [root / "Http" / "Requests" / "UserDto.php"]
        assert written[0].exists()

    def test_disabled_is_skipped(self, root: Path, caplog):
        report = RunReport()
        assert write_file(make_template(disabled=True), "x", root, report=report) == []
        assert "Skipping disabled template" in caplog.text
        assert report.skipped[0].reason == "disabled"

    def test_none_content_is_skipped(self, root: Path):
        assert write_file(make_template(), None, root) == []
        assert not any((root / "Dtos").iterdir())

    def test_naming_convention_applies_to_file_name(self, root: Path):
        config = ModeConfig(data={"naming_conventions": {"templates": {"defaults": ["lower"]}}})
        naming = SectionedNaming(config, {"lower": str.lower})
        written = write_file(make_template(), "x", root, naming=naming)
        assert written == [root / "Dtos" / "userdto.php"]


def test_generate_templates_renders_and_reports(root: Path, tmp_path: Path):
    context = TemplateContext(templates_path=tmp_path, require_existing_dirs=True)
    component = ComponentContext(name="Billing", path=root)
    report = RunReport()
    templates = [
        make_template(),
        make_template("broken.twig", engine="nope", file_name="Broken"),
        make_template("orphan.mustache", file_paths=["Nowhere"], file_name="Orphan"),
    ]

    written = generate_templates(templates, context, component, report=report)

    assert written == [root / "Dtos" / "UserDto.php"]
    assert written[0].read_text() == "class UserDto {}"
    assert [entry.name for entry in report.skipped] == ["broken.twig"]
    assert ("Files", "orphan.mustache") in [(e.kind, e.name) for e in report.errors]
