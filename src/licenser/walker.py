# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/walker.py
"""
Recursive discovery of candidate source files.

Every subdirectory is entered, hidden and build directories included; there
is no exclusion list. Sibling entries are visited in name order so output is
reproducible across runs. The first directory that cannot be listed, or entry
that cannot be stat-ed, aborts the walk with WalkError.
"""
from __future__ import annotations

import logging
import stat
from pathlib import Path

from licenser.exceptions import WalkError
from licenser.registry import is_source_file

logger = logging.getLogger(__name__)


def walk(root: Path) -> list[Path]:
    """Return all files under `root` whose extension is in the comment style registry."""
    found: list[Path] = []
    _walk_into(Path(root), found)
    return found


def _walk_into(directory: Path, found: list[Path]) -> None:
    logger.debug("Entering %s", directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise WalkError(f"cannot list directory {directory}: {e}", path=directory) from e

    for entry in entries:
        try:
            # Follows symlinks: a link to a directory is walked like a directory.
            mode = entry.stat().st_mode
        except OSError as e:
            raise WalkError(f"cannot stat {entry}: {e}", path=entry) from e

        if stat.S_ISDIR(mode):
            _walk_into(entry, found)
            continue

        if is_source_file(entry):
            logger.debug("Candidate %s", entry)
            found.append(entry)
