"""Standalone demo page blocks built from documented preview examples."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .analyzers.imports import detect_catalog_usage, parse_registry_url
from .analyzers.utils import kebab_to_pascal, unique
from .catalog import Catalog
from .config import RegistryConfig
from .constants import CATALOG_ALIAS, DEMO_CATALOG_IMPORTS, DEMO_IFRAME_HEIGHT
from .logging import get_logger
from .models import ComponentDescriptor, ManifestFile, PreviewExample, RegistryItem

_LOGGER = get_logger("demos")

_PAGE_TEMPLATE = """{imports}

export default function Page() {{
  return (
    <div className="flex min-h-screen items-center justify-center bg-background p-8">
      {code}
    </div>
  );
}}
"""


def _import_block(names: Sequence[str], component: str) -> str:
    listed = ",\n  ".join(names)
    return f'import {{\n  {listed},\n}} from "{CATALOG_ALIAS}{component}";'


def _uses_tag(code: str, name: str) -> bool:
    return f"<{name}" in code


def used_exports(descriptor: ComponentDescriptor, code: str) -> List[str]:
    return [name for name in descriptor.exports if _uses_tag(code, name)]


def generate_demo_page(
    descriptor: ComponentDescriptor,
    code: str,
    additional: Sequence[ComponentDescriptor] = (),
) -> str:
    """Render ``page.tsx`` that imports ``descriptor`` and wraps ``code`` in a layout."""
    imports: List[str] = []
    for tag, file_name in DEMO_CATALOG_IMPORTS.items():
        if _uses_tag(code, tag):
            imports.append(f'import {{ {tag} }} from "{CATALOG_ALIAS}{file_name}";')

    if descriptor.exports:
        imports.append(_import_block(descriptor.exports, descriptor.name))
    else:
        guess = kebab_to_pascal(descriptor.name)
        imports.append(f'import {{ {guess} }} from "{CATALOG_ALIAS}{descriptor.name}";')

    for other in additional:
        if other.name == descriptor.name:
            continue
        names = used_exports(other, code)
        if names:
            imports.append(_import_block(names, other.name))

    return _PAGE_TEMPLATE.format(imports="\n".join(imports), code=code)


def related_components(
    descriptor: ComponentDescriptor, catalog: Catalog, code: str
) -> List[ComponentDescriptor]:
    """Other descriptors the root references whose exports the example renders."""
    referenced = {ref.name for ref in descriptor.references}
    related: List[ComponentDescriptor] = []
    for other in catalog:
        if other.name == descriptor.name or other.name not in referenced:
            continue
        if used_exports(other, code):
            related.append(other)
    return related


def generate_demo_block(
    descriptor: ComponentDescriptor,
    preview: PreviewExample,
    catalog: Catalog,
    config: RegistryConfig,
) -> RegistryItem:
    """Build the ``<component>-demo-<example>`` block for one preview.

    The root's internal closure is not embedded again: the block points at
    the root's own manifest URL and lets the installer fetch it.
    """
    registry_name = config.registry.name
    scope = f"registry/{registry_name}/{descriptor.name}"
    additional = related_components(descriptor, catalog, preview.code)

    files = [
        ManifestFile(
            path=f"{scope}/page.tsx",
            content=generate_demo_page(descriptor, preview.code, additional),
            type="registry:page",
            target=f"app/{descriptor.name}/page.tsx",
        ),
        ManifestFile(
            path=f"{scope}/{descriptor.name}.tsx",
            content=descriptor.content,
            type="registry:component",
            target=f"components/ui/{descriptor.name}.tsx",
        ),
    ]
    for other in additional:
        files.append(
            ManifestFile(
                path=f"{scope}/{other.name}.tsx",
                content=other.content,
                type="registry:component",
                target=f"components/ui/{other.name}.tsx",
            )
        )

    # The tag scan can report components the import-based list lacks; both are kept.
    own_url = f"{config.base_url}/{descriptor.name}.json"
    external = [
        reference
        for reference in descriptor.registry_dependencies(config.base_url)
        if parse_registry_url(reference, config.base_url) is None
    ]
    detected = detect_catalog_usage(preview.code, config.catalog_map)

    return RegistryItem(
        name=demo_name(descriptor, preview),
        type="registry:block",
        description=descriptor.description or f"{descriptor.title} demo",
        dependencies=list(descriptor.dependencies),
        registry_dependencies=unique([own_url, *external, *detected]),
        files=files,
        meta={"iframeHeight": DEMO_IFRAME_HEIGHT},
    )


def demo_name(descriptor: ComponentDescriptor, preview: PreviewExample) -> str:
    return f"{descriptor.name}-demo-{preview.example}"


def generate_all_demo_blocks(catalog: Catalog, config: RegistryConfig) -> Dict[str, RegistryItem]:
    blocks: Dict[str, RegistryItem] = {}
    for descriptor in catalog:
        for preview in descriptor.previews:
            block = generate_demo_block(descriptor, preview, catalog, config)
            blocks[f"{block.name}.json"] = block
    _LOGGER.debug("Generated %d demo blocks", len(blocks))
    return blocks


__all__ = [
    "demo_name",
    "generate_all_demo_blocks",
    "generate_demo_block",
    "generate_demo_page",
    "related_components",
    "used_exports",
]
