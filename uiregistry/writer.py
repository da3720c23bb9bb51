"""JSON serialisation and on-disk output for generated manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .logging import get_logger

_LOGGER = get_logger("writer")


def serialize(document: Mapping[str, Any]) -> str:
    """Stable JSON text: insertion-ordered keys, two-space indent, trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_manifests(output_dir: Path, documents: Mapping[str, Dict[str, Any]]) -> List[Path]:
    """Write ``filename -> document`` pairs into ``output_dir``.

    ``OSError`` propagates; a partially written registry is a failed run.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for filename, document in documents.items():
        path = output_dir / filename
        path.write_text(serialize(document), encoding="utf-8")
        _LOGGER.debug("Wrote %s", path)
        written.append(path)
    return written


__all__ = ["serialize", "write_manifests"]
