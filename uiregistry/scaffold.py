"""Project scaffolding for ``uiregistry init``."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_DOCS_DIRS,
    DEFAULT_OUTPUT_DIR,
)
from .logging import get_logger

_LOGGER = get_logger("scaffold")

DEFAULT_PROJECT_NAME = "myui"
DEFAULT_HOMEPAGE = "https://myui.com"


@dataclass
class ScaffoldResult:
    """Where the config lives and whether this run created it."""

    path: Path
    created: bool


def detect_project_metadata(project: Path) -> Dict[str, str]:
    """Read name and homepage from ``package.json``; scope prefixes are dropped."""
    name = DEFAULT_PROJECT_NAME
    homepage = DEFAULT_HOMEPAGE
    package_json = project / "package.json"
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        data = {}
    if isinstance(data, dict):
        if isinstance(data.get("name"), str) and data["name"]:
            name = re.sub(r"^@[^/]+/", "", data["name"])
        if isinstance(data.get("homepage"), str) and data["homepage"]:
            homepage = data["homepage"].rstrip("/")
    return {"name": name, "homepage": homepage}


def render_config(name: str, homepage: str) -> str:
    document: Dict[str, Any] = {
        "base_url": f"{homepage}/r",
        "registry": {"name": name, "homepage": homepage},
        "components_dir": DEFAULT_COMPONENTS_DIR,
        "docs_dirs": list(DEFAULT_DOCS_DIRS),
        "output_dir": DEFAULT_OUTPUT_DIR,
    }
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)


def scaffold_project(project: Path) -> ScaffoldResult:
    """Create ``registry.config.yml`` unless one already exists."""
    config_path = project / CONFIG_FILENAME
    if config_path.exists():
        _LOGGER.info("skip %s already exists", CONFIG_FILENAME)
        return ScaffoldResult(path=config_path, created=False)

    metadata = detect_project_metadata(project)
    config_path.write_text(render_config(**metadata), encoding="utf-8")
    _LOGGER.info("created %s", CONFIG_FILENAME)
    return ScaffoldResult(path=config_path, created=True)


__all__ = ["ScaffoldResult", "detect_project_metadata", "render_config", "scaffold_project"]
