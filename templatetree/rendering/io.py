"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from pathlib import Path


def ensure_dir(path: Path, mode: int = 0o755) -> None:
    """Create *path* and any missing ancestors with the given permissions.

    Args:
        path: Directory that must exist afterwards
        mode: Permissions (octal) for every directory created
    """
    missing: list[Path] = []
    current = path
    while not current.exists() and current != current.parent:
        missing.append(current)
        current = current.parent

    for directory in reversed(missing):
        directory.mkdir(mode=mode, exist_ok=True)


def ensure_parent(path: Path, mode: int = 0o755) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
        mode: Permissions (octal) for created directories
    """
    ensure_dir(path.parent, mode)


def atomic_write_stream(
    path: Path,
    chunks: Iterable[str],
    mode: int = 0o644,
    encoding: str = "utf-8",
) -> None:
    """Stream text chunks to a file atomically using a temporary file.

    The destination only appears once every chunk was written; if producing
    a chunk fails the temporary file is removed and the error propagates.

    Args:
        path: Destination file path (parent must exist)
        chunks: Text pieces to write, in order
        mode: File permissions (octal)
        encoding: Output text encoding
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as tmp:
            for chunk in chunks:
                tmp.write(chunk)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
