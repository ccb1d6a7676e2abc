# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/registry.py
"""
Extension -> comment style table.

The table doubles as the filter deciding which files are source files:
anything whose extension is not listed here is never opened by the stamper.
Matching is exact and case-sensitive (".C" is not ".c").
"""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from licenser.schema import CommentStyle

_SLASH = CommentStyle(prefix="// ", suffix="\n")
_HASH = CommentStyle(prefix="# ", suffix="\n")
_BLOCK = CommentStyle(prefix="/* ", suffix="*/\n")

COMMENT_STYLES: Mapping[str, CommentStyle] = MappingProxyType({
    ".go": _SLASH,
    ".cpp": _SLASH,
    ".cc": _SLASH,
    ".h": _BLOCK,
    ".hpp": _SLASH,
    ".c": _BLOCK,
    ".sh": _HASH,
    ".bash": _HASH,
})


def lookup(extension: str) -> CommentStyle | None:
    """Return the comment style for `extension` (with leading dot), or None."""
    return COMMENT_STYLES.get(extension)


def is_source_file(path: Path) -> bool:
    return lookup(path.suffix) is not None
