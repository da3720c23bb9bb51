"""Core data models shared across the registry pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Container, Dict, List, Optional, Tuple

from .constants import REGISTRY_ITEM_SCHEMA_URL, REGISTRY_SCHEMA_URL


class ComponentKind(str, Enum):
    """Which scanned subdirectory family a descriptor came from."""

    UI = "ui"
    LIB = "lib"

    @property
    def registry_type(self) -> str:
        return f"registry:{self.value}"

    def target_for(self, name: str) -> str:
        if self is ComponentKind.LIB:
            return f"lib/{name}.ts"
        return f"components/ui/{name}.tsx"


class ImportKind(str, Enum):
    """Classification verdict for a single import specifier."""

    IGNORED = "ignored"
    PACKAGE = "package"
    CATALOG = "catalog"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ImportCategory:
    """Result of classifying one import specifier."""

    kind: ImportKind
    name: str


@dataclass(frozen=True)
class DependencyReference:
    """Pointer from a descriptor to a catalog entry or another descriptor."""

    kind: ImportKind
    name: str

    @property
    def is_internal(self) -> bool:
        return self.kind is ImportKind.INTERNAL

    def serialize(self, base_url: str) -> str:
        if self.is_internal:
            return f"{base_url}/{self.name}.json"
        return self.name


@dataclass
class ExtractedExports:
    """Symbols exported by a source file."""

    exports: List[str] = field(default_factory=list)
    default_export: Optional[str] = None


@dataclass
class ExtractedDependencies:
    """Classified imports for one source file, in first-seen order."""

    dependencies: List[str] = field(default_factory=list)
    registry_dependencies: List[str] = field(default_factory=list)
    internal_dependencies: List[str] = field(default_factory=list)

    def references(self) -> List[DependencyReference]:
        refs = [DependencyReference(ImportKind.CATALOG, name) for name in self.registry_dependencies]
        refs.extend(
            DependencyReference(ImportKind.INTERNAL, name) for name in self.internal_dependencies
        )
        return refs


@dataclass
class PreviewExample:
    """Documented usage snippet for a component."""

    component: str
    example: str
    code: str
    source_path: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.component, self.example)


@dataclass
class ComponentDescriptor:
    """Registry-relevant facts about one scanned source file."""

    name: str
    title: str
    description: str
    kind: ComponentKind
    source_path: str
    target_path: str
    folder: str
    content: str
    exports: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    references: List[DependencyReference] = field(default_factory=list)
    previews: List[PreviewExample] = field(default_factory=list)

    @property
    def registry_type(self) -> str:
        return self.kind.registry_type

    @property
    def display_description(self) -> str:
        return self.description or f"{self.title} component"

    def catalog_references(self) -> List[str]:
        return [ref.name for ref in self.references if not ref.is_internal]

    def internal_references(self) -> List[str]:
        return [ref.name for ref in self.references if ref.is_internal]

    def registry_dependencies(
        self, base_url: str, resolvable: Optional[Container[str]] = None
    ) -> List[str]:
        """Serialise references; internal names outside ``resolvable`` are dropped."""
        return [
            ref.serialize(base_url)
            for ref in self.references
            if resolvable is None or not ref.is_internal or ref.name in resolvable
        ]

    def to_file(self) -> "ManifestFile":
        return ManifestFile(
            path=self.source_path,
            content=self.content,
            type=self.registry_type,
            target=self.target_path,
        )


@dataclass
class BundleClosure:
    """Transitive internal-dependency expansion rooted at one descriptor."""

    root: ComponentDescriptor
    descriptors: List[ComponentDescriptor] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    registry_dependencies: List[str] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [descriptor.name for descriptor in self.descriptors]

    def files(self) -> List["ManifestFile"]:
        return [descriptor.to_file() for descriptor in self.descriptors]


@dataclass(frozen=True)
class ManifestFile:
    """One file embedded into an output manifest."""

    path: str
    content: str
    type: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "content": self.content,
            "type": self.type,
            "target": self.target,
        }


@dataclass
class RegistryItem:
    """A single installable manifest entry."""

    name: str
    type: str
    description: str
    files: List[ManifestFile] = field(default_factory=list)
    title: Optional[str] = None
    dependencies: List[str] = field(default_factory=list)
    registry_dependencies: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "$schema": REGISTRY_ITEM_SCHEMA_URL,
            "name": self.name,
            "type": self.type,
        }
        if self.title is not None:
            data["title"] = self.title
        data["description"] = self.description
        if self.dependencies:
            data["dependencies"] = list(self.dependencies)
        if self.registry_dependencies:
            data["registryDependencies"] = list(self.registry_dependencies)
        data["files"] = [item.to_dict() for item in self.files]
        if self.meta:
            data["meta"] = dict(self.meta)
        return data


@dataclass
class Registry:
    """The lightweight registry index document."""

    name: str
    homepage: str
    items: List[RegistryItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "$schema": REGISTRY_SCHEMA_URL,
            "name": self.name,
            "homepage": self.homepage,
            "items": [item.to_dict() for item in self.items],
        }
