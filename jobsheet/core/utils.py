"""Shared utility functions for the jobsheet package."""
import os
from pathlib import Path


def read_text(path: Path) -> str:
    """Read a transcript as UTF-8 text, replacing undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def get_config_value(key: str, default: str = "") -> str:
    """Get a configuration value from the environment, stripped of whitespace."""
    return os.getenv(key, default).strip()


def split_config_list(raw: str) -> tuple[str, ...]:
    """Split a comma separated setting into a tuple of non-empty entries."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())

