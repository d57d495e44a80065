"""Resolves the output directory and writes generated files to it."""

from __future__ import annotations

from pathlib import Path

DESKTOP_DIR_NAME = "Desktop"


class OutputDirectoryNotFoundError(FileNotFoundError):
    """Raised when the directory that should receive the module does not exist."""


def desktop_dir() -> Path:
    """Return the invoking user's desktop directory."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise OutputDirectoryNotFoundError(f"cannot determine home directory ({e})") from e

    desktop = home / DESKTOP_DIR_NAME
    if not desktop.is_dir():
        raise OutputDirectoryNotFoundError(str(desktop))
    return desktop


def resolve_output_dir(override: Path | None = None) -> Path:
    """Return *override* if given, else the desktop. The directory must already exist."""
    if override is None:
        return desktop_dir()

    if not override.is_dir():
        raise OutputDirectoryNotFoundError(str(override))
    return override


def write_artifact(output_dir: Path, filename: str, content: str) -> Path:
    """Write *content* to ``output_dir / filename``, replacing any existing file."""
    path = output_dir / filename
    path.write_text(content, encoding="utf-8")
    return path
