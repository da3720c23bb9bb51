"""Tests for uiregistry.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from uiregistry.config import ComponentsDir, ConfigError, RegistryConfig, load_config
from uiregistry.models import ComponentKind


def _write_config(root: Path, text: str) -> Path:
    path = root / "registry.config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_config_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="uiregistry init"):
        load_config(tmp_path)


def test_missing_base_url_is_fatal(tmp_path: Path) -> None:
    _write_config(tmp_path, "registry:\n  name: acme\n")

    with pytest.raises(ConfigError, match="base_url is required"):
        load_config(tmp_path)


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "- base_url\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_yaml_is_reported(tmp_path: Path) -> None:
    _write_config(tmp_path, "base_url: [unterminated\n")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_defaults_are_applied(tmp_path: Path) -> None:
    _write_config(tmp_path, "base_url: https://example.com/r/\n")

    config = load_config(tmp_path / "registry.config.yml")

    assert isinstance(config, RegistryConfig)
    assert config.root == tmp_path.resolve()
    assert config.base_url == "https://example.com/r"
    assert config.registry.name == "components"
    assert config.registry.homepage == ""
    assert config.components_dir == "src/registry"
    assert config.components_dirs == [
        ComponentsDir("ui", ComponentKind.UI),
        ComponentsDir("lib", ComponentKind.LIB),
    ]
    assert config.docs_dirs == ["content/docs/components"]
    assert config.output_dir == "public/r"
    assert config.output_root == tmp_path.resolve() / "public" / "r"
    assert config.catalog_map["button"] == "button"


def test_parses_expected_fields(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
base_url: "https://myui.com/r"
registry:
  name: myui
  homepage: "https://myui.com"
components_dir: registry
components_dirs:
  - name: ui
    type: ui
  - name: animated
    type: ui
  - name: hooks
    type: lib
docs_dirs:
  - docs/components
  - docs/blocks
output_dir: dist/r
catalog_components:
  fancy-button: button
  date-field: calendar
package_patterns:
  - "^sonner$"
""",
    )

    config = load_config(tmp_path)

    assert config.base_url == "https://myui.com/r"
    assert config.registry.name == "myui"
    assert config.registry.homepage == "https://myui.com"
    assert config.components_root == tmp_path.resolve() / "registry"
    assert [entry.name for entry in config.components_dirs] == ["ui", "animated", "hooks"]
    assert config.components_dirs[2].kind is ComponentKind.LIB
    assert config.docs_roots == [
        tmp_path.resolve() / "docs" / "components",
        tmp_path.resolve() / "docs" / "blocks",
    ]
    assert config.output_dir == "dist/r"
    assert config.catalog_map["fancy-button"] == "button"
    assert config.catalog_map["date-field"] == "calendar"
    assert config.catalog_map["tabs"] == "tabs"
    assert any(pattern.pattern == "^sonner$" for pattern in config.package_patterns)


def test_overrides_do_not_mutate_default_tables(tmp_path: Path) -> None:
    _write_config(tmp_path, "base_url: https://a.dev/r\ncatalog_components:\n  button: fancy-button\n")

    overridden = load_config(tmp_path)
    fresh = RegistryConfig(root=tmp_path, base_url="https://b.dev/r")

    assert overridden.catalog_map["button"] == "fancy-button"
    assert fresh.catalog_map["button"] == "button"


def test_unknown_component_kind_is_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "base_url: https://a.dev/r\ncomponents_dirs:\n  - {name: blocks, type: block}\n",
    )

    with pytest.raises(ConfigError, match="unknown type"):
        load_config(tmp_path)


def test_invalid_package_pattern_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "base_url: https://a.dev/r\npackage_patterns: ['(unclosed']\n")

    with pytest.raises(ConfigError, match="Invalid package pattern"):
        load_config(tmp_path)
