"""Transitive bundling of internal component dependencies."""

from __future__ import annotations

from typing import List, Set

from .analyzers.utils import unique
from .catalog import Catalog
from .logging import get_logger
from .models import BundleClosure, ComponentDescriptor

_LOGGER = get_logger("bundler")


def closure_of(descriptor: ComponentDescriptor, catalog: Catalog) -> BundleClosure:
    """Expand ``descriptor``'s internal references into a self-contained bundle.

    Names are marked visited before their references are walked, so
    self references and reference cycles terminate. References to names
    missing from ``catalog`` are dropped. Descriptors appear root first,
    then depth-first in each descriptor's own reference order.
    """

    closure = BundleClosure(root=descriptor)
    visited: Set[str] = set()
    packages: List[str] = []
    catalog_refs: List[str] = []

    def _visit(current: ComponentDescriptor) -> None:
        closure.descriptors.append(current)
        packages.extend(current.dependencies)
        catalog_refs.extend(current.catalog_references())
        for name in current.internal_references():
            if name in visited:
                continue
            target = catalog.get(name)
            if target is None:
                _LOGGER.debug("Unresolved internal reference %r from %s", name, current.name)
                continue
            visited.add(name)
            _visit(target)

    visited.add(descriptor.name)
    _visit(descriptor)

    embedded = set(closure.names)
    closure.dependencies = unique(packages)
    # Embedded names must never be referenced again.
    closure.registry_dependencies = [name for name in unique(catalog_refs) if name not in embedded]
    return closure


__all__ = ["closure_of"]
