"""Project-wide helpers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
