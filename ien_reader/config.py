"""
Config loader for the IEN Reader project.

All configuration lives in the configs/ directory as YAML files.
The pipeline scripts load their settings through this module so there's
one place to look when a directory or organisation name changes.

Usage:

    from ien_reader.config import load_config

    cfg = load_config("ien")
    raw_dir = cfg["data"]["raw_report_dir"]
    orgs = cfg["status_log"]["organizations"]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# Resolve configs/ relative to this file so the package works from any
# working directory.
_CONFIGS_DIR = Path(__file__).parent.parent / "configs"


def load_config(name: str, configs_dir: Path | str | None = None) -> dict[str, Any]:
    """
    Load a named YAML config file.

    Args:
        name: Config file name without the .yaml extension, e.g. "ien".
        configs_dir: Directory to look in. Defaults to the project's configs/.

    Returns:
        The parsed YAML contents as a nested dictionary (empty for an empty file).

    Raises:
        FileNotFoundError: If <configs_dir>/<name>.yaml does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    base = Path(configs_dir) if configs_dir is not None else _CONFIGS_DIR
    path = base / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            f"Expected one of: {sorted(p.stem for p in base.glob('*.yaml'))}"
        )
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
