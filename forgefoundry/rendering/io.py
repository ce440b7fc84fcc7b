"""Filesystem operations used by the generators."""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def make_directory(path: Path, mode: int = 0o755) -> None:
    """Create a directory and any missing parents."""
    path.mkdir(mode=mode, parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_name)


def all_files_recursive(root: Path) -> list[Path]:
    """List every regular file below ``root`` in a stable, sorted order."""
    return sorted(p for p in root.rglob("*") if p.is_file())
