# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/orchestrator.py
"""
Run sequence: LICENSE -> AUTHORS -> stamp every candidate source file.

Each step reports through `echo`, one line per action. LICENSE and AUTHORS
are created exclusively and skipped when present; any I/O failure aborts the
run at the first error, leaving files already stamped in place.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from licenser.exceptions import OrchestratorError
from licenser.schema import Copyright
from licenser.stamper import StampOutcome, stamp
from licenser.templates import render_authors, render_license
from licenser.utils.io import create_text_exclusive
from licenser.walker import walk

logger = logging.getLogger(__name__)

LICENSE_FILENAME = "LICENSE"
AUTHORS_FILENAME = "AUTHORS"

Echo = Callable[[str], None]


def _write_once(path: Path, text: str, echo: Echo) -> bool:
    name = path.name
    try:
        created = create_text_exclusive(path, text)
    except OSError as e:
        raise OrchestratorError(f"cannot write {path}: {e}", path=path) from e

    if created:
        echo(f"Writing {name} file")
    else:
        echo(f"{name} file exists, skipping")
    return created


def write_license_file(copyright: Copyright, root: Path, echo: Echo) -> bool:
    return _write_once(Path(root) / LICENSE_FILENAME, render_license(copyright), echo)


def write_authors_file(authors: Sequence[str], root: Path, echo: Echo) -> bool:
    return _write_once(Path(root) / AUTHORS_FILENAME, render_authors(authors), echo)


def stamp_all(
    copyright: Copyright, root: Path, echo: Echo
) -> list[tuple[Path, StampOutcome]]:
    """Stamp every candidate under `root`, in walk order. Stops at the first failure."""
    results: list[tuple[Path, StampOutcome]] = []
    for path in walk(Path(root)):
        outcome = stamp(copyright, path)
        if outcome is StampOutcome.SKIPPED:
            echo(f"{path} has a copyright, skipping")
        else:
            echo(str(path))
        results.append((path, outcome))
    return results


def run(
    project_name: str,
    authors: Sequence[str] = (),
    root: Path = Path("."),
    echo: Echo = print,
    year: int | None = None,
) -> list[tuple[Path, StampOutcome]]:
    """
    Execute a full licensing pass over `root`.

    Args:
        project_name: Name printed in every notice, used verbatim.
        authors: Lines for AUTHORS, in order.
        root: Directory receiving LICENSE/AUTHORS and walked for sources.
        echo: Sink for the one-line progress messages.
        year: Copyright year; defaults to the current calendar year.

    Returns:
        (path, outcome) for every candidate source file.
    """
    copyright = Copyright(
        year=year if year is not None else datetime.now().year,
        project_name=project_name,
    )
    logger.debug("Licensing %s for %s (%d)", root, copyright.project_name, copyright.year)

    write_license_file(copyright, root, echo)
    write_authors_file(list(authors), root, echo)
    return stamp_all(copyright, root, echo)
