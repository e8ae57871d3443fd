"""Filesystem scaffolding used by test sessions."""

from __future__ import annotations

from pathlib import Path

TEMP_DATA_DIR_NAME = "tempdata"


def ensure_temp_data_dir(base: Path | None = None, name: str = TEMP_DATA_DIR_NAME) -> Path:
    """Create the temp-data directory if it does not exist yet.

    Args:
        base: Parent directory. Defaults to the current working directory.
        name: Directory name (default: "tempdata").

    Returns:
        Path to the temp-data directory.
    """
    path = (base or Path.cwd()) / name
    path.mkdir(parents=True, exist_ok=True)
    return path
