"""In-memory and package-resource file systems.

Both use forward slashes regardless of the host OS, so template names are
the same on every platform.
"""

from __future__ import annotations

import posixpath
import shutil
from collections.abc import Mapping
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from ..core.models import FileEntry


def clean_virtual_path(path: str) -> str:
    """Normalize a forward-slash path and reject ones outside the tree."""
    cleaned = posixpath.normpath(path or ".")
    if cleaned.startswith("/") or cleaned == ".." or cleaned.startswith("../"):
        raise ValueError(f"Invalid virtual path: {path!r}")
    return cleaned


class _VirtualPaths:
    sep = "/"

    def join(self, *parts: str) -> str:
        return clean_virtual_path(posixpath.join(*parts))


class MemoryFileSystem(_VirtualPaths):
    """File tree held in a dict of ``path -> content``.

    Directories are implied by the file paths. ``str`` contents are stored
    UTF-8 encoded.
    """

    def __init__(self, files: Mapping[str, bytes | str] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = {"."}
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str, content: bytes | str) -> None:
        path = clean_virtual_path(path)
        if path == "." or path in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path!r}")
        parents = []
        parent = posixpath.dirname(path)
        while parent:
            if parent in self._files:
                raise NotADirectoryError(f"Not a directory: {parent!r}")
            parents.append(parent)
            parent = posixpath.dirname(parent)

        if isinstance(content, str):
            content = content.encode("utf-8")
        self._files[path] = content
        self._dirs.update(parents)

    def stat(self, path: str) -> FileEntry:
        cleaned = clean_virtual_path(path)
        if cleaned in self._dirs:
            return FileEntry(path=path, is_dir=True)
        if cleaned in self._files:
            return FileEntry(path=path, is_dir=False)
        raise FileNotFoundError(f"No such file or directory: {path!r}")

    def list_dir(self, path: str) -> list[tuple[str, bool]]:
        cleaned = clean_virtual_path(path)
        if cleaned in self._files:
            raise NotADirectoryError(f"Not a directory: {path!r}")
        if cleaned not in self._dirs:
            raise FileNotFoundError(f"No such file or directory: {path!r}")

        parent = "" if cleaned == "." else cleaned
        children: dict[str, bool] = {}
        for candidate in (*self._dirs, *self._files):
            if candidate != "." and posixpath.dirname(candidate) == parent:
                children[posixpath.basename(candidate)] = candidate in self._dirs
        return sorted(children.items())

    def read_bytes(self, path: str) -> bytes:
        cleaned = clean_virtual_path(path)
        if cleaned in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path!r}")
        try:
            return self._files[cleaned]
        except KeyError:
            raise FileNotFoundError(f"No such file or directory: {path!r}") from None

    def copy_file(self, path: str, destination: Path) -> None:
        Path(destination).write_bytes(self.read_bytes(path))


class ResourceFileSystem(_VirtualPaths):
    """Templates shipped as package data (or any ``Traversable``).

    ``anchor`` is either a package name, resolved with
    ``importlib.resources.files``, or a ``Traversable`` such as a ``Path``.
    """

    def __init__(self, anchor: str | Traversable) -> None:
        self._root = resources.files(anchor) if isinstance(anchor, str) else anchor

    def _resolve(self, path: str) -> Traversable:
        cleaned = clean_virtual_path(path)
        node = self._root
        if cleaned != ".":
            for part in cleaned.split("/"):
                node = node.joinpath(part)
        if not (node.is_dir() or node.is_file()):
            raise FileNotFoundError(f"No such file or directory: {path!r}")
        return node

    def stat(self, path: str) -> FileEntry:
        return FileEntry(path=path, is_dir=self._resolve(path).is_dir())

    def list_dir(self, path: str) -> list[tuple[str, bool]]:
        node = self._resolve(path)
        if not node.is_dir():
            raise NotADirectoryError(f"Not a directory: {path!r}")
        return sorted((child.name, child.is_dir()) for child in node.iterdir())

    def read_bytes(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def copy_file(self, path: str, destination: Path) -> None:
        with self._resolve(path).open("rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
