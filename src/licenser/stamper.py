# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/stamper.py
"""
Per-file copyright stamping.

A file counts as already stamped when its first line (up to and including the
first newline, or the whole file when there is none) contains "©". Only the
first line is inspected: a notice below a shebang line is not recognized and
the file will be stamped again.

Stamping writes the rendered comment followed by the untouched original bytes
to a temp file next to the target, then renames it over the target.
"""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from licenser.exceptions import StampError
from licenser.registry import lookup
from licenser.schema import Copyright
from licenser.templates import render_comment_for
from licenser.utils.io import replace_atomic

logger = logging.getLogger(__name__)

COPYRIGHT_GLYPH = "©"


class StampOutcome(str, Enum):
    STAMPED = "stamped"
    SKIPPED = "skipped"


def has_copyright(stream: BinaryIO) -> bool:
    """
    Check the first line of `stream` for the copyright glyph.

    The line is decoded as UTF-8 one codepoint at a time; invalid byte
    sequences become U+FFFD and never match. The stream position is left
    after the first line.
    """
    first_line = stream.readline()
    return COPYRIGHT_GLYPH in first_line.decode("utf-8", errors="replace")


def stamp(copyright: Copyright, path: Path) -> StampOutcome:
    """
    Prepend the copyright comment to `path` unless its first line has one.

    Raises:
        StampError: If the file cannot be read or replaced, or its extension
            has no registered comment style.
    """
    path = Path(path)
    style = lookup(path.suffix)
    if style is None:
        raise StampError(f"no comment style for {path} (extension {path.suffix!r})", path=path)

    try:
        with path.open("rb") as f:
            if has_copyright(f):
                return StampOutcome.SKIPPED
            f.seek(0)
            original = f.read()
    except OSError as e:
        raise StampError(f"cannot read {path}: {e}", path=path) from e

    comment = render_comment_for(style, copyright)
    try:
        replace_atomic(path, comment.encode("utf-8") + original)
    except OSError as e:
        raise StampError(f"cannot rewrite {path}: {e}", path=path) from e

    logger.debug("Stamped %s (%d bytes of original content)", path, len(original))
    return StampOutcome.STAMPED
