"""Tests for uiregistry.catalog."""

from __future__ import annotations

from tests._fixtures.project_builder import ProjectBuilder
from uiregistry.catalog import Catalog
from uiregistry.models import ComponentKind, DependencyReference, ImportKind, PreviewExample


def test_build_describes_ui_and_lib_files(project: ProjectBuilder) -> None:
    project.write(
        {
            "src/registry/ui/plan-card.tsx": """
                import * as React from "react"
                import { Badge } from "@/components/ui/badge"
                import { cn } from "@/lib/utils"
                import { Check } from "lucide-react"

                export const PlanCard = () => null
                PlanCard.displayName = "PlanCard"
            """,
            "src/registry/ui/index.ts": 'export * from "./plan-card"\n',
            "src/registry/ui/README.md": "# notes\n",
            "src/registry/lib/utils.ts": """
                import { clsx } from "clsx"
                export function cn(...inputs: string[]) { return clsx(inputs) }
            """,
        }
    )

    catalog = project.catalog()

    assert [descriptor.name for descriptor in catalog] == ["plan-card", "utils"]

    card = catalog.get("plan-card")
    assert card is not None
    assert card.title == "Plan Card"
    assert card.kind is ComponentKind.UI
    assert card.folder == "ui"
    assert card.source_path == "src/registry/ui/plan-card.tsx"
    assert card.target_path == "components/ui/plan-card.tsx"
    assert card.exports == ["PlanCard"]
    assert card.dependencies == ["lucide-react"]
    assert card.references == [
        DependencyReference(ImportKind.CATALOG, "badge"),
        DependencyReference(ImportKind.INTERNAL, "utils"),
    ]
    assert card.registry_dependencies("https://example.com/r") == [
        "badge",
        "https://example.com/r/utils.json",
    ]

    utils = catalog.get("utils")
    assert utils is not None
    assert utils.kind is ComponentKind.LIB
    assert utils.target_path == "lib/utils.ts"
    assert utils.registry_type == "registry:lib"
    assert utils.dependencies == ["clsx"]


def test_missing_directories_are_skipped(project: ProjectBuilder) -> None:
    project.write({"src/registry/ui/button-group.tsx": "export const ButtonGroup = () => null\n"})

    catalog = project.catalog()

    assert [descriptor.name for descriptor in catalog] == ["button-group"]


def test_custom_components_dirs(project: ProjectBuilder) -> None:
    project.write_config(
        """
        base_url: https://example.com/r
        components_dir: registry
        components_dirs:
          - {name: animated, type: ui}
          - {name: hooks, type: lib}
        """
    )
    project.write(
        {
            "registry/animated/fade-in.tsx": "export const FadeIn = () => null\n",
            "registry/hooks/use-mounted.ts": "export function useMounted() { return true }\n",
            "registry/ui/ignored.tsx": "export const Ignored = () => null\n",
        }
    )

    catalog = project.catalog()

    names = {descriptor.name: descriptor for descriptor in catalog}
    assert set(names) == {"fade-in", "use-mounted"}
    assert names["fade-in"].folder == "animated"
    assert names["use-mounted"].target_path == "lib/use-mounted.ts"


def test_attach_previews_ignores_unknown_and_duplicates(project: ProjectBuilder) -> None:
    project.write({"src/registry/ui/plan-card.tsx": "export const PlanCard = () => null\n"})
    catalog = project.catalog()

    attached = catalog.attach_previews(
        [
            PreviewExample("plan-card", "preview", "<PlanCard />", "docs/plan-card.mdx"),
            PreviewExample("plan-card", "preview", "<PlanCard again />", "docs/plan-card.mdx"),
            PreviewExample("missing", "preview", "<Missing />", "docs/missing.mdx"),
        ]
    )

    assert attached == 1
    card = catalog.get("plan-card")
    assert card is not None
    assert [preview.code for preview in card.previews] == ["<PlanCard />"]


def test_catalog_keeps_first_descriptor_for_duplicate_names(project: ProjectBuilder) -> None:
    project.write_config(
        """
        base_url: https://example.com/r
        components_dirs:
          - {name: ui, type: ui}
          - {name: animated, type: ui}
        """
    )
    project.write(
        {
            "src/registry/ui/badge-dot.tsx": "export const BadgeDot = () => null\n",
            "src/registry/animated/badge-dot.tsx": "export const AnimatedDot = () => null\n",
        }
    )

    catalog = project.catalog()

    assert len(catalog) == 1
    descriptor = catalog.get("badge-dot")
    assert descriptor is not None
    assert descriptor.folder == "ui"
    assert "badge-dot" in catalog
    assert isinstance(catalog, Catalog)
