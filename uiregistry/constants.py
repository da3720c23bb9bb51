"""Default lookup tables for import classification and manifest output."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Tuple

REGISTRY_SCHEMA_URL = "https://ui.shadcn.com/schema/registry.json"
REGISTRY_ITEM_SCHEMA_URL = "https://ui.shadcn.com/schema/registry-item.json"

CONFIG_FILENAME = "registry.config.yml"

# Local ``@/components/ui/<file>`` name -> published catalog name.
DEFAULT_CATALOG_COMPONENTS: Mapping[str, str] = MappingProxyType(
    {
        "button": "button",
        "badge": "badge",
        "input": "input",
        "label": "label",
        "select": "select",
        "progress": "progress",
        "card": "card",
        "dialog": "dialog",
        "popover": "popover",
        "tooltip": "tooltip",
        "avatar": "avatar",
        "checkbox": "checkbox",
        "switch": "switch",
        "tabs": "tabs",
    }
)

# Bare specifiers recorded as package dependencies. Unknown packages are ignored.
DEFAULT_PACKAGE_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(r"^lucide-react$"),
    re.compile(r"^class-variance-authority$"),
    re.compile(r"^clsx$"),
    re.compile(r"^tailwind-merge$"),
    re.compile(r"^motion$"),
    re.compile(r"^framer-motion$"),
    re.compile(r"^@radix-ui/"),
    re.compile(r"^date-fns$"),
    re.compile(r"^zod$"),
)

# Runtime imports every consumer project already provides.
EXCLUDED_PACKAGES = frozenset(
    {
        "react",
        "react-dom",
        "next",
        "next/link",
        "next/image",
        "next/navigation",
    }
)

CATALOG_ALIAS = "@/components/ui/"
REGISTRY_ALIAS = "@/registry/"
LIB_ALIAS = "@/lib/"

SOURCE_SUFFIXES = (".tsx", ".ts")
BARREL_FILES = frozenset({"index.ts", "index.tsx"})

# Catalog tags the demo generator always looks for in example code.
COMMON_CATALOG_TAGS: Tuple[str, ...] = ("Button", "Badge", "Input", "Label", "Progress")

# Tag -> catalog file imported by generated demo pages.
DEMO_CATALOG_IMPORTS: Mapping[str, str] = MappingProxyType(
    {
        "Label": "label",
        "Button": "button",
        "Input": "input",
        "Badge": "badge",
        "Progress": "progress",
    }
)

DEMO_IFRAME_HEIGHT = "600px"

DEFAULT_REGISTRY_NAME = "components"
DEFAULT_COMPONENTS_DIR = "src/registry"
DEFAULT_COMPONENTS_DIRS: Tuple[Tuple[str, str], ...] = (("ui", "ui"), ("lib", "lib"))
DEFAULT_DOCS_DIRS: Tuple[str, ...] = ("content/docs/components",)
DEFAULT_OUTPUT_DIR = "public/r"
