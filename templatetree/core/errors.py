"""Errors raised by parse and render passes.

Every error carries the path it happened at and chains the underlying
exception. None of them is retried.
"""

from __future__ import annotations


class TemplateTreeError(Exception):
    """Base class for all templatetree errors."""

    def __init__(self, path: object, message: str) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


class TraversalError(TemplateTreeError):
    """Raised when a directory cannot be listed or an entry vanished."""


class TemplateReadError(TemplateTreeError):
    """Raised when a template file cannot be read or decoded."""


class TemplateParseError(TemplateTreeError):
    """Raised when a template body does not compile."""

    def __init__(self, path: object, message: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(path, message)


class TemplateExecutionError(TemplateTreeError):
    """Raised when substituting data into a compiled template fails."""


class OutputError(TemplateTreeError):
    """Raised when an output directory or file cannot be written."""


class CopyError(TemplateTreeError):
    """Raised when a non-template asset cannot be copied."""


class WalkCancelled(TemplateTreeError):
    """Raised when a walk is cancelled before visiting a directory."""

    def __init__(self, path: object) -> None:
        super().__init__(path, "walk cancelled")
