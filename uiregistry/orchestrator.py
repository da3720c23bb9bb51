"""Pipeline orchestration for registry builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog import Catalog, CatalogBuilder
from .config import RegistryConfig, load_config
from .demos import generate_all_demo_blocks
from .docs_scanner import DocsScanner
from .logging import get_logger
from .manifests import (
    aggregate_filename,
    generate_aggregate_manifest,
    generate_component_manifests,
    generate_registry_index,
)
from .writer import write_manifests

REGISTRY_FILENAME = "registry.json"


@dataclass
class BuildResult:
    """Outcome of a registry build."""

    output_dir: Path
    documents: Dict[str, Dict[str, Any]]
    written: List[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.documents)


class Orchestrator:
    """Runs scan -> docs -> manifests -> demos -> write for one project."""

    def __init__(
        self,
        catalog_builder: CatalogBuilder | None = None,
        docs_scanner: DocsScanner | None = None,
    ) -> None:
        self.catalog_builder = catalog_builder or CatalogBuilder()
        self.docs_scanner = docs_scanner or DocsScanner()
        self.logger = get_logger("orchestrator")

    def run_build(
        self,
        path: str | Path = ".",
        *,
        output_dir: Optional[str] = None,
        dry_run: bool = False,
    ) -> BuildResult:
        """Load the project config and build (and unless ``dry_run``, write) the registry."""
        project = Path(path).expanduser().resolve()
        config = load_config(project)
        if output_dir:
            config.output_dir = output_dir
        self.logger.info("Building registry %r for %s", config.registry.name, config.root)
        return self.build(config, dry_run=dry_run)

    def build(self, config: RegistryConfig, *, dry_run: bool = False) -> BuildResult:
        self.logger.info("Scanning components...")
        catalog = self.catalog_builder.build(config)
        self.docs_scanner.scan(config).apply(catalog)

        documents = self.generate(catalog, config)
        result = BuildResult(output_dir=config.output_root, documents=documents)
        if dry_run:
            self.logger.info("Dry-run: %d files not written", result.file_count)
            return result

        result.written = write_manifests(config.output_root, documents)
        self.logger.info("Generated %d files in %s", len(result.written), config.output_dir)
        return result

    def generate(self, catalog: Catalog, config: RegistryConfig) -> Dict[str, Dict[str, Any]]:
        """Return every output document keyed by file name, in write order.

        The index and the aggregate own their file names; a component or demo
        whose file name is already taken is skipped with a warning.
        """
        aggregate = aggregate_filename(config)
        documents: Dict[str, Dict[str, Any]] = {
            REGISTRY_FILENAME: generate_registry_index(catalog, config).to_dict()
        }
        reserved = {REGISTRY_FILENAME, aggregate}
        for filename, item in generate_component_manifests(catalog, config).items():
            if filename in reserved:
                self.logger.warning(
                    "Component %r collides with reserved output %s; skipped", item.name, filename
                )
                continue
            documents[filename] = item.to_dict()
        documents[aggregate] = generate_aggregate_manifest(catalog, config).to_dict()
        for filename, block in generate_all_demo_blocks(catalog, config).items():
            if filename in documents:
                self.logger.warning("Demo block %s collides with an existing output; skipped", filename)
                continue
            documents[filename] = block.to_dict()
        return documents


__all__ = ["BuildResult", "Orchestrator", "REGISTRY_FILENAME"]
