# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# src/licenser/utils/io.py
from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def _default_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def create_text_exclusive(path: Path, text: str) -> bool:
    """
    Create `path` holding `text`, only if it does not exist yet.

    Args:
        path: Target file path
        text: Text content to write

    Returns:
        True if the file was created, False if it already existed.

    The text is written and fsync-ed to a temp file in the same directory,
    which is then hard-linked to `path`. os.link() fails if `path` exists, so
    a file created concurrently by another process is never overwritten, and
    `path` only ever appears complete. The temp name is always removed.
    Any OSError other than FileExistsError propagates.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())

        os.chmod(tmp_path, _default_file_mode())

        try:
            os.link(tmp_path, path)
        except FileExistsError:
            return False
        return True
    finally:
        tmp_path.unlink(missing_ok=True)


def replace_atomic(path: Path, data: bytes) -> None:
    """
    Replace the contents of `path` with `data` atomically using temp file + rename.

    Args:
        path: Existing file to replace
        data: New file content

    The temp file lives in the same directory as `path` so os.replace() is a
    rename on the same filesystem. Permission bits of the original file are
    carried over. On failure the temp file is removed and the error re-raised;
    the original file is left as it was.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    tmp_path = Path(tmp_name)

    try:
        # Write to temp file with flush + fsync for durability
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        shutil.copymode(path, tmp_path)

        # Atomic rename (replaces existing file)
        os.replace(tmp_path, path)
    except Exception:
        # Clean up temp file on failure
        if tmp_path.exists():
            tmp_path.unlink()
        raise
