"""Configuration loading for registry builds (registry.config.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_CATALOG_COMPONENTS,
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_COMPONENTS_DIRS,
    DEFAULT_DOCS_DIRS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PACKAGE_PATTERNS,
    DEFAULT_REGISTRY_NAME,
)
from .models import ComponentKind


class ConfigError(RuntimeError):
    """Raised when the configuration is missing, unparsable or incomplete."""


@dataclass
class RegistryMeta:
    """Display metadata for the published registry."""

    name: str = DEFAULT_REGISTRY_NAME
    homepage: str = ""


@dataclass(frozen=True)
class ComponentsDir:
    """A subdirectory of ``components_dir`` scanned for one component kind."""

    name: str
    kind: ComponentKind


def _default_components_dirs() -> List[ComponentsDir]:
    return [ComponentsDir(name, ComponentKind(kind)) for name, kind in DEFAULT_COMPONENTS_DIRS]


@dataclass
class RegistryConfig:
    """Resolved settings for one registry build."""

    root: Path
    base_url: str
    registry: RegistryMeta = field(default_factory=RegistryMeta)
    components_dir: str = DEFAULT_COMPONENTS_DIR
    components_dirs: List[ComponentsDir] = field(default_factory=_default_components_dirs)
    docs_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_DOCS_DIRS))
    output_dir: str = DEFAULT_OUTPUT_DIR
    catalog_components: Dict[str, str] = field(default_factory=dict)
    extra_package_patterns: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @property
    def components_root(self) -> Path:
        return (self.root / self.components_dir).resolve()

    @property
    def output_root(self) -> Path:
        return (self.root / self.output_dir).resolve()

    @property
    def docs_roots(self) -> List[Path]:
        return [(self.root / entry).resolve() for entry in self.docs_dirs]

    @property
    def catalog_map(self) -> Dict[str, str]:
        """Default catalog names overlaid with user overrides."""
        merged = dict(DEFAULT_CATALOG_COMPONENTS)
        merged.update(self.catalog_components)
        return merged

    @property
    def package_patterns(self) -> Tuple[re.Pattern[str], ...]:
        extra = tuple(re.compile(pattern) for pattern in self.extra_package_patterns)
        return DEFAULT_PACKAGE_PATTERNS + extra


def load_config(config_path: Path) -> RegistryConfig:
    """Load and validate ``registry.config.yml`` from a file or its directory."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        raise ConfigError(
            f"No {CONFIG_FILENAME} found at {config_file.parent}. Run `uiregistry init` to create one."
        )
    root = config_file.parent

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    base_url = _as_str(data.get("base_url"))
    if not base_url or not base_url.strip():
        raise ConfigError("base_url is required in config.")

    registry_data = _as_dict(data.get("registry"))
    registry = RegistryMeta(
        name=_as_str(registry_data.get("name")) or DEFAULT_REGISTRY_NAME,
        homepage=_as_str(registry_data.get("homepage")) or "",
    )

    config = RegistryConfig(root=root, base_url=base_url.strip(), registry=registry)

    components_dir = _as_str(data.get("components_dir"))
    if components_dir:
        config.components_dir = components_dir

    if "components_dirs" in data and data["components_dirs"] is not None:
        config.components_dirs = _parse_components_dirs(data["components_dirs"])

    if "docs_dirs" in data and data["docs_dirs"] is not None:
        config.docs_dirs = _as_str_list(data["docs_dirs"])

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = output_dir

    config.catalog_components = _as_str_mapping(data.get("catalog_components"))
    config.extra_package_patterns = _as_str_list(data.get("package_patterns"))
    for pattern in config.extra_package_patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid package pattern {pattern!r}: {exc}") from exc

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _parse_components_dirs(value: Any) -> List[ComponentsDir]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigError("components_dirs must be a list of {name, type} entries")
    entries: List[ComponentsDir] = []
    for raw in value:
        item = _as_dict(raw)
        name = _as_str(item.get("name"))
        kind = _as_str(item.get("type"))
        if not name:
            raise ConfigError("components_dirs entries require a name")
        try:
            entries.append(ComponentsDir(name=name, kind=ComponentKind(kind or "ui")))
        except ValueError as exc:
            raise ConfigError(
                f"components_dirs entry {name!r} has unknown type {kind!r} (expected 'ui' or 'lib')"
            ) from exc
    return entries


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


def _as_str_mapping(value: Any) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    result: Dict[str, str] = {}
    for key, item in value.items():
        text = _as_str(item)
        if text is not None:
            result[str(key)] = text
    return result


__all__ = [
    "ComponentsDir",
    "ConfigError",
    "RegistryConfig",
    "RegistryMeta",
    "load_config",
]
