"""Import classification: packages, catalog references and internal components."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Sequence

from ..constants import (
    CATALOG_ALIAS,
    COMMON_CATALOG_TAGS,
    DEFAULT_CATALOG_COMPONENTS,
    DEFAULT_PACKAGE_PATTERNS,
    EXCLUDED_PACKAGES,
    LIB_ALIAS,
    REGISTRY_ALIAS,
)
from ..models import ExtractedDependencies, ImportCategory, ImportKind
from .utils import strip_comments, strip_source_suffix, unique

if TYPE_CHECKING:  # pragma: no cover
    from ..config import RegistryConfig

_IMPORT_STATEMENT = re.compile(
    r"import\s+"
    r"(?:(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)"
    r"(?:\s*,\s*(?:\{[^}]*\}|\*\s+as\s+\w+|\w+))*\s+from\s+)?"
    r"[\"']([^\"']+)[\"']"
)
_TYPE_ONLY = re.compile(r"^import\s+type\b")


class ImportClassifier:
    """Sorts import specifiers into package, catalog, internal or ignored."""

    def __init__(
        self,
        components_root: Path,
        *,
        catalog_map: Optional[Mapping[str, str]] = None,
        package_patterns: Sequence[re.Pattern[str]] = DEFAULT_PACKAGE_PATTERNS,
        excluded_packages: Iterable[str] = EXCLUDED_PACKAGES,
    ) -> None:
        self.components_root = Path(os.path.normpath(Path(components_root).absolute()))
        self.catalog_map = dict(catalog_map if catalog_map is not None else DEFAULT_CATALOG_COMPONENTS)
        self.package_patterns = tuple(package_patterns)
        self.excluded_packages = frozenset(excluded_packages)

    @classmethod
    def from_config(cls, config: "RegistryConfig") -> "ImportClassifier":
        return cls(
            config.components_root,
            catalog_map=config.catalog_map,
            package_patterns=config.package_patterns,
        )

    def classify(self, import_path: str, file_path: Path) -> ImportCategory:
        if import_path in self.excluded_packages:
            return ImportCategory(ImportKind.IGNORED, import_path)

        if not import_path.startswith((".", "@/")):
            for pattern in self.package_patterns:
                if pattern.search(import_path):
                    return ImportCategory(ImportKind.PACKAGE, _package_root(import_path))
            return ImportCategory(ImportKind.IGNORED, import_path)

        if import_path.startswith(CATALOG_ALIAS):
            component_file = import_path[len(CATALOG_ALIAS):]
            return ImportCategory(
                ImportKind.CATALOG, self.catalog_map.get(component_file) or component_file
            )

        if import_path.startswith(REGISTRY_ALIAS):
            last = import_path[len(REGISTRY_ALIAS):].split("/")[-1]
            return ImportCategory(ImportKind.INTERNAL, strip_source_suffix(last))

        if import_path.startswith(("./", "../")):
            if self._inside_registry(file_path, import_path):
                name = strip_source_suffix(import_path.rstrip("/").split("/")[-1])
                return ImportCategory(ImportKind.INTERNAL, name)

        if import_path.startswith(LIB_ALIAS):
            lib_name = strip_source_suffix(import_path[len(LIB_ALIAS):])
            return ImportCategory(ImportKind.INTERNAL, lib_name)

        return ImportCategory(ImportKind.IGNORED, import_path)

    def extract(self, content: str, file_path: Path) -> ExtractedDependencies:
        """Classify every value import in ``content``; type-only imports are skipped."""
        packages: List[str] = []
        catalog: List[str] = []
        internal: List[str] = []

        for match in _IMPORT_STATEMENT.finditer(strip_comments(content)):
            if _TYPE_ONLY.match(match.group(0)):
                continue
            category = self.classify(match.group(1), file_path)
            if category.kind is ImportKind.PACKAGE:
                packages.append(category.name)
            elif category.kind is ImportKind.CATALOG:
                catalog.append(category.name)
            elif category.kind is ImportKind.INTERNAL:
                internal.append(category.name)

        return ExtractedDependencies(
            dependencies=unique(packages),
            registry_dependencies=unique(catalog),
            internal_dependencies=unique(internal),
        )

    def _inside_registry(self, file_path: Path, import_path: str) -> bool:
        base = Path(file_path).absolute().parent
        resolved = Path(os.path.normpath(base / import_path))
        return resolved == self.components_root or self.components_root in resolved.parents


def _package_root(import_path: str) -> str:
    if import_path.startswith("@"):
        return "/".join(import_path.split("/")[:2])
    return import_path


def classify_import(
    import_path: str,
    file_path: Path,
    *,
    components_root: Path,
    catalog_map: Optional[Mapping[str, str]] = None,
    package_patterns: Sequence[re.Pattern[str]] = DEFAULT_PACKAGE_PATTERNS,
    excluded_packages: Iterable[str] = EXCLUDED_PACKAGES,
) -> ImportCategory:
    """Classify one specifier with the default tables plus ``catalog_map`` overrides."""
    merged = dict(DEFAULT_CATALOG_COMPONENTS)
    if catalog_map:
        merged.update(catalog_map)
    classifier = ImportClassifier(
        components_root,
        catalog_map=merged,
        package_patterns=package_patterns,
        excluded_packages=excluded_packages,
    )
    return classifier.classify(import_path, file_path)


def extract_dependencies(
    content: str, file_path: Path, config: "RegistryConfig"
) -> ExtractedDependencies:
    return ImportClassifier.from_config(config).extract(content, file_path)


def internal_to_registry_urls(names: Iterable[str], base_url: str) -> List[str]:
    return [f"{base_url}/{name}.json" for name in names]


def parse_registry_url(reference: str, base_url: str) -> Optional[str]:
    """Return the component name for a ``<base_url>/<name>.json`` reference.

    References that do not point into ``base_url`` return ``None``.
    """
    if not base_url or not reference.startswith(base_url):
        return None
    name = reference[len(base_url):]
    if name.startswith("/"):
        name = name[1:]
    if name.endswith(".json"):
        name = name[: -len(".json")]
    return name or None


def detect_catalog_usage(
    code: str, catalog_map: Optional[Mapping[str, str]] = None
) -> List[str]:
    """Find catalog components used as JSX tags in ``code``.

    Purely textual: a ``<Button`` anywhere counts, whether or not the
    example imports it.
    """
    mapping = catalog_map if catalog_map is not None else DEFAULT_CATALOG_COMPONENTS
    detected: List[str] = []

    for component_name, registry_name in mapping.items():
        pascal = component_name[:1].upper() + component_name[1:]
        if f"<{pascal}" in code:
            detected.append(registry_name)

    for tag in COMMON_CATALOG_TAGS:
        if f"<{tag}" in code:
            registry_name = mapping.get(tag.lower())
            if registry_name:
                detected.append(registry_name)

    return unique(detected)


__all__ = [
    "ImportClassifier",
    "classify_import",
    "detect_catalog_usage",
    "extract_dependencies",
    "internal_to_registry_urls",
    "parse_registry_url",
]
