from __future__ import annotations

from forgefoundry.core.report import RunReport


def test_summary_differentiates_outcomes():
    report = RunReport()
    report.add_created("Files", "/c/Dtos/UserDto.php")
    report.add_skipped("Files", "view.blade.php", "disabled")
    report.add_skipped("Units", "/c/Models/User")
    report.add_error("Paths", "/c/Missing", "directory does not exist")

    lines = report.summary_lines()

    assert "Generated Files: 1" in lines
    assert "  + /c/Dtos/UserDto.php" in lines
    assert "  - [Files] view.blade.php (disabled)" in lines
    assert "  - [Units] /c/Models/User (No reason)" in lines
    assert lines[-2:] == ["Errors:", "  - [Paths] /c/Missing (directory does not exist)"]
    assert report.ok is False


def test_empty_report_is_ok():
    report = RunReport()
    assert report.ok
    assert report.summary_lines() == [
        "Generated Directories: 0",
        "Generated Units: 0",
        "Generated Files: 0",
    ]
