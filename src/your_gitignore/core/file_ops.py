"""Whole-file text reads and writes."""

from __future__ import annotations

import os
import uuid
from pathlib import Path

NEW_FILE_MODE = 0o666


def read_text_exact(path: Path, encoding: str = "utf-8") -> str:
    """Read *path* without newline translation."""
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def write_text_atomic(path: Path, content: str, encoding: str = "utf-8") -> int:
    """Replace *path* with *content* via a temp file in the same directory.

    Either the old file or the complete new one is visible; a failed write
    leaves no partial file behind. A symlinked *path* is written through:
    the link stays and its destination gets the new content.

    Returns:
        Number of bytes written.
    """
    data = content.encode(encoding)
    if path.is_symlink():
        path = path.resolve()

    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex[:12]}.tmp")
    # New files get 0o666 minus the umask, applied by open(2).
    fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, NEW_FILE_MODE)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return len(data)
