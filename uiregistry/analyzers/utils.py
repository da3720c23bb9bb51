"""Shared text helpers for the export and import analyzers."""

from __future__ import annotations

import re
from typing import Iterable, List

_COMMENT_OR_STRING = re.compile(
    r"'(?:\\.|[^'\\\n])*'"
    r'|"(?:\\.|[^"\\\n])*"'
    r"|`(?:\\.|[^`\\])*`"
    r"|(?P<comment>/\*.*?\*/|//[^\n]*)",
    re.DOTALL,
)
_SOURCE_SUFFIX = re.compile(r"\.(tsx?|jsx?)$")


def strip_comments(content: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments.

    Comments and string literals are matched in one left-to-right pass, so
    ``//`` inside a block comment or a URL string is left alone.
    """
    return _COMMENT_OR_STRING.sub(_drop_comment, content)


def _drop_comment(match: re.Match[str]) -> str:
    return "" if match.group("comment") is not None else match.group(0)


def strip_source_suffix(name: str) -> str:
    return _SOURCE_SUFFIX.sub("", name)


def kebab_to_title(value: str) -> str:
    """``plan-card`` -> ``Plan Card``."""
    return " ".join(word[:1].upper() + word[1:] for word in value.split("-"))


def kebab_to_pascal(value: str) -> str:
    """``plan-card`` -> ``PlanCard``."""
    return "".join(word[:1].upper() + word[1:] for word in value.split("-"))


def unique(values: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return ordered


__all__ = [
    "kebab_to_pascal",
    "kebab_to_title",
    "strip_comments",
    "strip_source_suffix",
    "unique",
]
