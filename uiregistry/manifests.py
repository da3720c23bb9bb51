"""Registry index, per-component and aggregate manifest generation."""

from __future__ import annotations

from typing import Dict, List

from .analyzers.imports import parse_registry_url
from .analyzers.utils import unique
from .bundler import closure_of
from .catalog import Catalog
from .config import RegistryConfig
from .logging import get_logger
from .models import ComponentKind, Registry, RegistryItem

_LOGGER = get_logger("manifests")

_BLOCK_TYPE = "registry:block"


def generate_registry_index(catalog: Catalog, config: RegistryConfig) -> Registry:
    """One unbundled item per descriptor; a lightweight browse index."""
    items: List[RegistryItem] = []
    for descriptor in catalog:
        items.append(
            RegistryItem(
                name=descriptor.name,
                type=descriptor.registry_type,
                title=descriptor.title,
                description=descriptor.display_description,
                dependencies=list(descriptor.dependencies),
                registry_dependencies=descriptor.registry_dependencies(config.base_url, catalog),
                files=[descriptor.to_file()],
            )
        )
    return Registry(name=config.registry.name, homepage=config.registry.homepage, items=items)


def generate_component_manifests(
    catalog: Catalog, config: RegistryConfig
) -> Dict[str, RegistryItem]:
    """Bundle each descriptor with its internal closure, keyed by output file name.

    Internal dependencies travel as embedded files; only external catalog
    names remain in ``registryDependencies``.
    """
    manifests: Dict[str, RegistryItem] = {}
    for descriptor in catalog:
        closure = closure_of(descriptor, catalog)
        if len(closure.descriptors) > 1:
            _LOGGER.debug(
                "Bundled %s with %s", descriptor.name, ", ".join(closure.names[1:])
            )
        manifests[f"{descriptor.name}.json"] = RegistryItem(
            name=descriptor.name,
            type=descriptor.registry_type,
            title=descriptor.title,
            description=descriptor.display_description,
            dependencies=closure.dependencies,
            registry_dependencies=closure.registry_dependencies,
            files=closure.files(),
        )
    return manifests


def generate_aggregate_manifest(catalog: Catalog, config: RegistryConfig) -> RegistryItem:
    """Every ui/lib file in one block, without self references."""
    registry_name = config.registry.name
    files = []
    packages: List[str] = []
    references: List[str] = []

    for descriptor in catalog:
        if descriptor.kind not in (ComponentKind.UI, ComponentKind.LIB):
            continue
        files.append(descriptor.to_file())
        packages.extend(descriptor.dependencies)
        for reference in descriptor.registry_dependencies(config.base_url):
            if parse_registry_url(reference, config.base_url) is None:
                references.append(reference)

    return RegistryItem(
        name=f"{registry_name}-all",
        type=_BLOCK_TYPE,
        description=f"All {registry_name} components and utilities.",
        dependencies=unique(packages),
        registry_dependencies=unique(references),
        files=files,
    )


def aggregate_filename(config: RegistryConfig) -> str:
    return f"{config.registry.name}-all.json"


__all__ = [
    "aggregate_filename",
    "generate_aggregate_manifest",
    "generate_component_manifests",
    "generate_registry_index",
]
