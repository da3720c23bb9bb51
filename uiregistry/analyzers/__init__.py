"""Lexical analyzers for component sources."""

from __future__ import annotations

from .exports import (
    extract_exports,
    extract_exports_from_file,
    filter_component_exports,
    filter_utility_exports,
)
from .imports import (
    ImportClassifier,
    classify_import,
    detect_catalog_usage,
    extract_dependencies,
    internal_to_registry_urls,
    parse_registry_url,
)

__all__ = [
    "ImportClassifier",
    "classify_import",
    "detect_catalog_usage",
    "extract_dependencies",
    "extract_exports",
    "extract_exports_from_file",
    "filter_component_exports",
    "filter_utility_exports",
    "internal_to_registry_urls",
    "parse_registry_url",
]
