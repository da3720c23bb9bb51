"""Documentation scanning for component descriptions and preview examples."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import yaml

from .catalog import Catalog
from .config import RegistryConfig
from .logging import get_logger
from .models import PreviewExample

_LOGGER = get_logger("docs")

_FRONTMATTER = re.compile(r"\A---\r?\n(.*?)\r?\n---", re.DOTALL)
_DESCRIPTION_LINE = re.compile(r"^description:\s*(.+?)\s*$", re.MULTILINE)
_PREVIEW_TAG = re.compile(r"<ComponentPreview\b[^>]*>")
_COMPONENT_ATTR = re.compile(r"component=[\"']([^\"']+)[\"']")
_EXAMPLE_ATTR = re.compile(r"example=[\"']([^\"']+)[\"']")
_CLOSING_TAG = "</ComponentPreview>"
_DOC_SUFFIX = ".mdx"


@dataclass
class DocsIndex:
    """Descriptions and previews gathered from documentation pages."""

    descriptions: Dict[str, str] = field(default_factory=dict)
    previews: List[PreviewExample] = field(default_factory=list)

    def apply(self, catalog: Catalog) -> None:
        for name, description in self.descriptions.items():
            descriptor = catalog.get(name)
            if descriptor is not None:
                descriptor.description = description
        attached = catalog.attach_previews(self.previews)
        _LOGGER.debug("Attached %d preview examples", attached)


def parse_frontmatter_description(content: str) -> Optional[str]:
    match = _FRONTMATTER.match(content)
    if not match:
        return None
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        _LOGGER.debug("Unparsable front matter, reading description line: %s", exc)
        return _description_line(match.group(1))
    if not isinstance(data, dict):
        return None
    description = data.get("description")
    if description is None:
        return None
    text = str(description).strip()
    return text or None


def _description_line(frontmatter: str) -> Optional[str]:
    line = _DESCRIPTION_LINE.search(frontmatter)
    if not line:
        return None
    text = line.group(1).strip("\"'").strip()
    return text or None


def extract_previews(content: str, component: str, source_path: str) -> List[PreviewExample]:
    """Collect ``<ComponentPreview component=... example=...>`` bodies for ``component``.

    Tags naming another component, lacking an ``example`` attribute, or
    missing their closing tag are ignored.
    """
    previews: List[PreviewExample] = []
    for match in _PREVIEW_TAG.finditer(content):
        tag = match.group(0)
        component_attr = _COMPONENT_ATTR.search(tag)
        example_attr = _EXAMPLE_ATTR.search(tag)
        if not component_attr or component_attr.group(1) != component or not example_attr:
            continue
        end = content.find(_CLOSING_TAG, match.end())
        if end == -1:
            continue
        code = content[match.end():end].strip()
        if not code:
            continue
        previews.append(
            PreviewExample(
                component=component,
                example=example_attr.group(1),
                code=code,
                source_path=source_path,
            )
        )
    return previews


def _iter_doc_pages(directory: Path) -> Iterator[Path]:
    for path in sorted(directory.iterdir(), key=lambda item: item.name):
        if path.suffix == _DOC_SUFFIX and path.is_file():
            yield path


class DocsScanner:
    """Reads ``.mdx`` pages named after components."""

    def scan(self, config: RegistryConfig) -> DocsIndex:
        index = DocsIndex()
        for directory in config.docs_roots:
            if not directory.is_dir():
                _LOGGER.debug("Docs directory %s not found; skipping", directory)
                continue
            for path in _iter_doc_pages(directory):
                try:
                    content = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as exc:
                    _LOGGER.warning("Skipping %s: %s", path, exc)
                    continue
                component = path.stem
                description = parse_frontmatter_description(content)
                if description:
                    index.descriptions[component] = description
                index.previews.extend(extract_previews(content, component, path.as_posix()))
        _LOGGER.info("Collected %d preview examples", len(index.previews))
        return index


__all__ = ["DocsIndex", "DocsScanner", "extract_previews", "parse_frontmatter_description"]
