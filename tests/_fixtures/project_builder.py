"""Helper utilities for constructing throwaway component projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from uiregistry.catalog import Catalog, CatalogBuilder
from uiregistry.config import RegistryConfig, load_config

DEFAULT_CONFIG = """\
base_url: https://example.com/r
registry:
  name: acme
  homepage: https://example.com
"""


class ProjectBuilder:
    """Writes component sources and docs into a temp project, then loads it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_config(self, text: str = DEFAULT_CONFIG) -> Path:
        path = self.root / "registry.config.yml"
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    def config(self) -> RegistryConfig:
        if not (self.root / "registry.config.yml").exists():
            self.write_config()
        return load_config(self.root)

    def catalog(self) -> Catalog:
        return CatalogBuilder().build(self.config())

    def path(self) -> Path:
        return self.root


__all__ = ["DEFAULT_CONFIG", "ProjectBuilder"]
