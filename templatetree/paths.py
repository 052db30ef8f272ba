"""Template names and output paths."""

from __future__ import annotations

import os
import posixpath
from pathlib import Path

from .filesystem.base import FileSystem


def template_name(fs: FileSystem, root: str, *segments: str) -> str:
    """Name a template after its full path under *root*.

    Same-named files in different directories therefore never collide:
    ``a/foo.tmpl`` and ``b/foo.tmpl`` stay two templates.
    """
    return fs.join(root, *segments)


def _normalize(path: str, sep: str) -> str:
    pathmod = posixpath if sep == "/" else os.path
    return pathmod.normpath(path or ".")


def _with_sep(path: str, sep: str) -> str:
    return path if path.endswith(sep) else path + sep


def _cut_suffix(value: str, suffix: str) -> str:
    if suffix and value.lower().endswith(suffix.lower()):
        return value[: -len(suffix)]
    return value


def destination_path(
    source: str,
    root: str,
    output_root: str | Path,
    sep: str,
    strip_ext: str | None = None,
) -> Path:
    """Map a source file onto the output tree.

    The root prefix is cut from *source*, then *strip_ext* (if given, case
    insensitive), and the remainder is joined onto *output_root*::

        /src/a/b/page.tex.tmpl -> /out/a/b/page.tex

    Args:
        source: Full source path as produced by the walk
        root: Walk root
        output_root: Output directory
        sep: Separator used by *source* and *root*
        strip_ext: Template extension to remove, ``None`` for plain assets

    Returns:
        Destination path on the local disk
    """
    normalized_root = _normalize(root, sep)
    normalized_source = _normalize(source, sep)

    if normalized_source == normalized_root:
        # The walk root is itself a file: keep its base name.
        relative = normalized_source.rsplit(sep, 1)[-1]
    elif normalized_root == ".":
        relative = normalized_source
    elif normalized_source.startswith(_with_sep(normalized_root, sep)):
        relative = normalized_source[len(normalized_root) :]
    else:
        raise ValueError(f"{source!r} is not under {root!r}")

    if strip_ext:
        relative = _cut_suffix(relative, strip_ext)

    parts = [part for part in relative.split(sep) if part]
    return Path(output_root).joinpath(*parts)
