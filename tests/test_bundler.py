"""Tests for uiregistry.bundler."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from uiregistry.bundler import closure_of
from uiregistry.catalog import Catalog
from uiregistry.models import (
    ComponentDescriptor,
    ComponentKind,
    DependencyReference,
    ImportKind,
)


def _descriptor(
    name: str,
    *,
    internal: Sequence[str] = (),
    catalog: Sequence[str] = (),
    packages: Iterable[str] = (),
    kind: ComponentKind = ComponentKind.UI,
) -> ComponentDescriptor:
    references: List[DependencyReference] = [
        DependencyReference(ImportKind.CATALOG, item) for item in catalog
    ]
    references.extend(DependencyReference(ImportKind.INTERNAL, item) for item in internal)
    return ComponentDescriptor(
        name=name,
        title=name.title(),
        description="",
        kind=kind,
        source_path=f"src/registry/{kind.value}/{name}.tsx",
        target_path=kind.target_for(name),
        folder=kind.value,
        content=f"// {name}\n",
        dependencies=list(packages),
        references=references,
    )


def test_mutual_cycle_terminates_with_each_file_once() -> None:
    catalog = Catalog([_descriptor("a", internal=["b"]), _descriptor("b", internal=["a"])])

    closure = closure_of(catalog.get("a"), catalog)

    assert closure.names == ["a", "b"]


def test_self_reference_terminates() -> None:
    catalog = Catalog([_descriptor("loop", internal=["loop"])])

    closure = closure_of(catalog.get("loop"), catalog)

    assert closure.names == ["loop"]


def test_visitation_is_root_first_depth_first() -> None:
    catalog = Catalog(
        [
            _descriptor("root", internal=["left", "right"]),
            _descriptor("left", internal=["leaf"], kind=ComponentKind.LIB),
            _descriptor("right", internal=["leaf"], kind=ComponentKind.LIB),
            _descriptor("leaf", kind=ComponentKind.LIB),
        ]
    )

    closure = closure_of(catalog.get("root"), catalog)

    assert closure.names == ["root", "left", "leaf", "right"]
    assert [item.target for item in closure.files()] == [
        "components/ui/root.tsx",
        "lib/left.ts",
        "lib/leaf.ts",
        "lib/right.ts",
    ]


def test_unresolved_references_are_dropped() -> None:
    catalog = Catalog([_descriptor("card", internal=["ghost", "utils"]), _descriptor("utils")])

    closure = closure_of(catalog.get("card"), catalog)

    assert closure.names == ["card", "utils"]


def test_aggregates_external_needs_across_closure() -> None:
    catalog = Catalog(
        [
            _descriptor("card", internal=["utils"], catalog=["button"], packages=["lucide-react"]),
            _descriptor("utils", catalog=["badge", "button"], packages=["clsx", "tailwind-merge"]),
        ]
    )

    closure = closure_of(catalog.get("card"), catalog)

    assert closure.dependencies == ["lucide-react", "clsx", "tailwind-merge"]
    assert closure.registry_dependencies == ["button", "badge"]


def test_closure_is_idempotent() -> None:
    catalog = Catalog([_descriptor("a", internal=["b"]), _descriptor("b", internal=["c", "a"]), _descriptor("c")])

    first = closure_of(catalog.get("a"), catalog)
    second = closure_of(catalog.get("a"), catalog)

    assert first.names == second.names == ["a", "b", "c"]


def test_partition_excludes_embedded_names_from_references() -> None:
    catalog = Catalog(
        [
            _descriptor("dialog-form", internal=["button"], catalog=["button", "input"]),
            _descriptor("button"),
        ]
    )

    closure = closure_of(catalog.get("dialog-form"), catalog)

    assert closure.names == ["dialog-form", "button"]
    assert closure.registry_dependencies == ["input"]
