"""Component catalog scanning: one descriptor per registry source file."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .analyzers.exports import extract_exports
from .analyzers.imports import ImportClassifier
from .analyzers.utils import kebab_to_title, strip_source_suffix
from .config import ComponentsDir, RegistryConfig
from .constants import BARREL_FILES, SOURCE_SUFFIXES
from .logging import get_logger
from .models import ComponentDescriptor, PreviewExample

_LOGGER = get_logger("catalog")


class Catalog:
    """Read-only view over the descriptors produced by one scan."""

    def __init__(self, descriptors: Iterable[ComponentDescriptor] = ()) -> None:
        self._descriptors: List[ComponentDescriptor] = []
        self._by_name: Dict[str, ComponentDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in self._by_name:
                _LOGGER.warning(
                    "Duplicate component name %r from %s; keeping %s",
                    descriptor.name,
                    descriptor.source_path,
                    self._by_name[descriptor.name].source_path,
                )
                continue
            self._descriptors.append(descriptor)
            self._by_name[descriptor.name] = descriptor

    def __iter__(self) -> Iterator[ComponentDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[ComponentDescriptor]:
        return self._by_name.get(name)

    def attach_previews(self, previews: Iterable[PreviewExample]) -> int:
        """Attach previews to matching descriptors; returns how many were attached."""
        attached = 0
        for preview in previews:
            descriptor = self._by_name.get(preview.component)
            if descriptor is None:
                _LOGGER.debug("No component named %r for preview %r", preview.component, preview.example)
                continue
            if any(existing.example == preview.example for existing in descriptor.previews):
                _LOGGER.debug("Skipping duplicate preview %s/%s", preview.component, preview.example)
                continue
            descriptor.previews.append(preview)
            attached += 1
        return attached


def _iter_source_files(directory: Path) -> Iterator[Path]:
    for path in sorted(directory.iterdir(), key=lambda item: item.name):
        if path.name in BARREL_FILES:
            continue
        if not path.name.endswith(SOURCE_SUFFIXES):
            continue
        if not path.is_file():
            continue
        yield path


def _relative_to_root(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


class CatalogBuilder:
    """Walks the configured component directories and builds descriptors."""

    def build(self, config: RegistryConfig) -> Catalog:
        classifier = ImportClassifier.from_config(config)
        components_root = config.components_root
        descriptors: List[ComponentDescriptor] = []

        for entry in config.components_dirs:
            directory = components_root / entry.name
            if not directory.is_dir():
                _LOGGER.debug("Components directory %s not found; skipping", directory)
                continue
            for path in _iter_source_files(directory):
                descriptor = self._describe(path, entry, config, classifier)
                if descriptor is not None:
                    descriptors.append(descriptor)

        catalog = Catalog(descriptors)
        _LOGGER.info("Found %d components", len(catalog))
        return catalog

    def _describe(
        self,
        path: Path,
        entry: ComponentsDir,
        config: RegistryConfig,
        classifier: ImportClassifier,
    ) -> Optional[ComponentDescriptor]:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.warning("Skipping %s: %s", path, exc)
            return None

        name = strip_source_suffix(path.name)
        extracted = extract_exports(content)
        deps = classifier.extract(content, path)

        return ComponentDescriptor(
            name=name,
            title=kebab_to_title(name),
            description="",
            kind=entry.kind,
            source_path=_relative_to_root(path, config.root.resolve()),
            target_path=entry.kind.target_for(name),
            folder=entry.name,
            content=content,
            exports=extracted.exports,
            dependencies=deps.dependencies,
            references=deps.references(),
        )


__all__ = ["Catalog", "CatalogBuilder"]
