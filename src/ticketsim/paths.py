"""Path resolution helpers for config-driven paths."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def is_absolute_like(path: str) -> bool:
    return Path(path).is_absolute() or path.startswith("~")


def resolve_path(base_dir: Path, path: str) -> Path:
    if is_absolute_like(path):
        return Path(path).expanduser().resolve()
    return (base_dir / path).resolve()


def resolve_config_paths(config_file_path: Path, paths: Iterable[str]) -> List[Path]:
    """Resolve paths listed in a config file relative to that file's directory."""
    config_dir = config_file_path.resolve().parent
    return [resolve_path(config_dir, path) for path in paths]
