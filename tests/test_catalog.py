from __future__ import annotations

import logging
from pathlib import Path

import pytest

from forgefoundry.core.errors import FatalWiringError
from forgefoundry.core.report import RunReport
from forgefoundry.templates.catalog import discover, file_extension


def test_file_extension_is_final_suffix():
    assert file_extension("view.blade.php") == "php"
    assert file_extension("dto.mustache") == "mustache"
    assert file_extension("README") == ""


def test_discover_filters_by_extension(templates_dir: Path, write_template, caplog):
    write_template("dto.mustache", "body")
    write_template("notes.txt", "ignored")
    write_template("nested/view.blade.php", "body")
    report = RunReport()

    with caplog.at_level(logging.ERROR):
        templates = discover(templates_dir, ["mustache", "php"], report)

    assert list(templates) == ["dto.mustache", "view.blade.php"]
    assert templates["view.blade.php"] == (templates_dir / "nested" / "view.blade.php").resolve()
    assert "'txt' is not an accepted template engine" in caplog.text
    assert [entry.name for entry in report.skipped] == ["notes.txt"]


def test_discover_order_is_stable(templates_dir: Path, write_template):
    for name in ("c.twig", "a.twig", "b.twig"):
        write_template(name, "")
    assert list(discover(templates_dir, ["twig"])) == ["a.twig", "b.twig", "c.twig"]


def test_discover_without_directory_is_fatal(tmp_path: Path):
    with pytest.raises(FatalWiringError):
        discover(tmp_path / "missing", ["mustache"])


def test_duplicate_name_keeps_last_and_warns(templates_dir: Path, write_template, caplog):
    write_template("a/dto.mustache", "first")
    write_template("b/dto.mustache", "second")

    with caplog.at_level(logging.WARNING):
        templates = discover(templates_dir, ["mustache"])

    assert templates == {"dto.mustache": (templates_dir / "b" / "dto.mustache").resolve()}
    assert "Template 'dto.mustache'" in caplog.text
    assert "replaces the one at" in caplog.text
