"""Component registry generation for shadcn-style UI libraries."""

from __future__ import annotations

from .bundler import closure_of
from .catalog import Catalog, CatalogBuilder
from .config import ConfigError, RegistryConfig, load_config
from .orchestrator import BuildResult, Orchestrator

__version__ = "0.3.2"

__all__ = [
    "BuildResult",
    "Catalog",
    "CatalogBuilder",
    "ConfigError",
    "Orchestrator",
    "RegistryConfig",
    "closure_of",
    "load_config",
]
