"""Native operating-system file access."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..core.models import FileEntry


class OSFileSystem:
    """Paths on the local disk, joined with the OS separator."""

    sep = os.sep

    def join(self, *parts: str) -> str:
        return os.path.normpath(os.path.join(*parts))

    def stat(self, path: str) -> FileEntry:
        if not os.path.exists(path):
            raise FileNotFoundError(f"No such file or directory: {path!r}")
        return FileEntry(path=path, is_dir=os.path.isdir(path))

    def list_dir(self, path: str) -> list[tuple[str, bool]]:
        with os.scandir(path) as it:
            # Symlinked directories are not descended into.
            return sorted(
                (entry.name, entry.is_dir(follow_symlinks=False)) for entry in it
            )

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()

    def copy_file(self, path: str, destination: Path) -> None:
        shutil.copyfile(path, destination)
