"""Lexical export extraction for TypeScript/TSX component sources."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from ..models import ExtractedExports
from .utils import strip_comments, unique

_EXPORT_LIST = re.compile(r"export\s*\{([^}]+)\}")
_EXPORT_CONST = re.compile(r"export\s+const\s+(\w+)\s*[=:]")
_EXPORT_FUNCTION = re.compile(r"export\s+(?:async\s+)?function\s+(\w+)\s*[(<]")
_EXPORT_CLASS = re.compile(r"export\s+class\s+(\w+)")
_EXPORT_DEFAULT = re.compile(
    r"export\s+default\s+(?:async\s+)?(?:function\s*\*?\s*|class\s+)?(\w+)"
)
_DISPLAY_NAME = re.compile(r"(\w+)\.displayName\s*=\s*[\"'](\w+)[\"']")
_ALIAS = re.compile(r"(\w+)\s+as\s+(\w+)")
_VALID_NAME = re.compile(r"^[A-Za-z]\w*$")
_DEFAULT_KEYWORDS = frozenset({"async", "class", "function"})


def extract_exports(content: str) -> ExtractedExports:
    """Return the exported symbol names of ``content``.

    This is a best-effort regex scan, not a parse. Comments are removed
    first so commented-out declarations never count. Unrecognised input
    yields an empty result rather than an error.
    """

    clean = strip_comments(content)
    names: List[str] = []

    for match in _EXPORT_LIST.finditer(clean):
        names.extend(_split_export_list(match.group(1)))

    for pattern in (_EXPORT_CONST, _EXPORT_FUNCTION, _EXPORT_CLASS):
        names.extend(match.group(1) for match in pattern.finditer(clean))

    default_export: Optional[str] = None
    for match in _EXPORT_DEFAULT.finditer(clean):
        candidate = match.group(1)
        if _VALID_NAME.match(candidate) and candidate not in _DEFAULT_KEYWORDS:
            default_export = candidate

    for match in _DISPLAY_NAME.finditer(clean):
        local = match.group(1)
        if local in names:
            continue
        if _is_exported_locally(local, clean):
            names.append(local)

    exports = [name for name in unique(names) if _VALID_NAME.match(name)]
    return ExtractedExports(exports=exports, default_export=default_export)


def extract_exports_from_file(path: Path) -> ExtractedExports:
    return extract_exports(path.read_text(encoding="utf-8"))


def _split_export_list(body: str) -> List[str]:
    names: List[str] = []
    for item in body.split(","):
        trimmed = item.strip()
        if not trimmed or trimmed.startswith("type "):
            continue
        alias = _ALIAS.search(trimmed)
        names.append(alias.group(2) if alias else trimmed)
    return names


def _is_exported_locally(name: str, content: str) -> bool:
    escaped = re.escape(name)
    pattern = re.compile(
        rf"export\s*\{{[^}}]*\b{escaped}\b[^}}]*\}}|export\s+const\s+{escaped}\b"
    )
    return bool(pattern.search(content))


def filter_component_exports(exports: List[str]) -> List[str]:
    """Keep PascalCase names (React components)."""
    return [name for name in exports if re.match(r"^[A-Z][a-zA-Z0-9]*$", name)]


def filter_utility_exports(exports: List[str]) -> List[str]:
    """Keep camelCase helpers and SCREAMING_CASE constants."""
    return [
        name
        for name in exports
        if re.match(r"^[a-z][a-zA-Z0-9]*$", name) or re.match(r"^[A-Z_]+$", name)
    ]


__all__ = [
    "extract_exports",
    "extract_exports_from_file",
    "filter_component_exports",
    "filter_utility_exports",
]
