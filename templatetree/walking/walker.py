"""Depth-first directory walk over a :class:`FileSystem`."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from ..core.errors import TraversalError, WalkCancelled
from ..core.models import FileEntry
from ..filesystem.base import FileSystem
from ..paths import template_name

logger = logging.getLogger(__name__)


def _check_cancelled(cancel: threading.Event | None, path: str) -> None:
    if cancel is not None and cancel.is_set():
        raise WalkCancelled(path)


def _walk_dir(
    fs: FileSystem, path: str, cancel: threading.Event | None
) -> Iterator[FileEntry]:
    _check_cancelled(cancel, path)

    try:
        entries = fs.list_dir(path)
    except (OSError, ValueError) as exc:
        raise TraversalError(path, f"cannot list directory: {exc}") from exc

    logger.debug(f"Walking {path} ({len(entries)} entries)")
    for name, is_dir in entries:
        child = template_name(fs, path, name)
        if is_dir:
            yield from _walk_dir(fs, child, cancel)
        else:
            yield FileEntry(path=child, is_dir=False)


def walk_entries(
    fs: FileSystem, root: str, cancel: threading.Event | None = None
) -> Iterator[FileEntry]:
    """Yield every file under *root*, depth-first and sorted by name.

    Directories are descended into but never yielded. If *root* is a file
    it is yielded on its own. The walk stops with :class:`WalkCancelled`
    when *cancel* is set before a directory is listed.

    Args:
        fs: File system to walk
        root: Directory (or file) to start from
        cancel: Optional cancellation flag

    Raises:
        TraversalError: Root or a directory could not be read
    """
    _check_cancelled(cancel, root)

    try:
        top = fs.stat(root)
    except (OSError, ValueError) as exc:
        raise TraversalError(root, f"cannot read root: {exc}") from exc

    if not top.is_dir:
        yield top
        return

    yield from _walk_dir(fs, root, cancel)
