"""Run summary of generated, skipped and errored entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportEntry:
    kind: str
    name: str
    reason: str | None = None


@dataclass
class RunReport:
    """Collects the outcome of every scaffolding action in one run."""

    created: dict[str, list[str]] = field(
        default_factory=lambda: {"Directories": [], "Units": [], "Files": []}
    )
    skipped: list[ReportEntry] = field(default_factory=list)
    errors: list[ReportEntry] = field(default_factory=list)

    def add_created(self, kind: str, name: str) -> None:
        self.created.setdefault(kind, []).append(name)

    def add_skipped(self, kind: str, name: str, reason: str | None = None) -> None:
        self.skipped.append(ReportEntry(kind, name, reason))

    def add_error(self, kind: str, name: str, message: str) -> None:
        self.errors.append(ReportEntry(kind, name, message))

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary_lines(self) -> list[str]:
        lines: list[str] = []
        for kind, names in self.created.items():
            lines.append(f"Generated {kind}: {len(names)}")
            lines.extend(f"  + {name}" for name in names)
        if self.skipped:
            lines.append("Skipped:")
            lines.extend(
                f"  - [{entry.kind}] {entry.name} ({entry.reason or 'No reason'})"
                for entry in self.skipped
            )
        if self.errors:
            lines.append("Errors:")
            lines.extend(
                f"  - [{entry.kind}] {entry.name} ({entry.reason})"
                for entry in self.errors
            )
        return lines
