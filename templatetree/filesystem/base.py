"""File-access abstraction shared by the walker, loader and renderer."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.models import FileEntry


@runtime_checkable
class FileSystem(Protocol):
    """Read-only view of a directory tree.

    Paths are plain strings joined with ``sep``. ``list_dir`` must return
    children sorted by name so walks are reproducible.
    """

    sep: str

    def join(self, *parts: str) -> str:
        """Join and normalize path segments."""
        ...

    def stat(self, path: str) -> FileEntry:
        """Describe *path*; raise ``FileNotFoundError`` if it does not exist."""
        ...

    def list_dir(self, path: str) -> list[tuple[str, bool]]:
        """List ``(name, is_dir)`` for the direct children of *path*, sorted by name."""
        ...

    def read_bytes(self, path: str) -> bytes:
        ...

    def copy_file(self, path: str, destination: Path) -> None:
        """Copy the bytes of *path* to *destination* on the local disk."""
        ...
