"""Configuration, models and errors shared by all templatetree modules."""

from .config import DEFAULT_TEMPLATE_EXT, ParserConfig
from .errors import (
    CopyError,
    OutputError,
    TemplateExecutionError,
    TemplateParseError,
    TemplateReadError,
    TemplateTreeError,
    TraversalError,
    WalkCancelled,
)
from .models import FileEntry, ParsedTemplate, RenderJob

__all__ = [
    "DEFAULT_TEMPLATE_EXT",
    "CopyError",
    "FileEntry",
    "OutputError",
    "ParsedTemplate",
    "ParserConfig",
    "RenderJob",
    "TemplateExecutionError",
    "TemplateParseError",
    "TemplateReadError",
    "TemplateTreeError",
    "TraversalError",
    "WalkCancelled",
]
