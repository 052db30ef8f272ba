"""Template file classification by extension."""

from __future__ import annotations

import posixpath


def file_extension(path: str) -> str:
    """Return the suffix after the last dot of the base name, dot included.

    Unlike :func:`os.path.splitext`, a leading dot counts: ``.tmpl`` has the
    extension ``.tmpl``.
    """
    name = posixpath.basename(path.replace("\\", "/"))
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def matches_extension(path: str, extension: str) -> bool:
    return file_extension(path).lower() == extension.lower()
