"""Templatetree - parse and render directory trees of Jinja2 templates.

Every file whose extension matches the template extension (``.tmpl`` by
default) is parsed under its full path, so same-named templates in
different directories never collide. Rendering mirrors the source tree into
an output directory, stripping the template extension and copying all other
files verbatim.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.config import (  # noqa: E402
    DEFAULT_TEMPLATE_EXT,
    ParserConfig,
    block_delims,
    delims,
    encoding,
    ext,
    modes,
    whitespace,
)
from .core.errors import (  # noqa: E402
    CopyError,
    OutputError,
    TemplateExecutionError,
    TemplateParseError,
    TemplateReadError,
    TemplateTreeError,
    TraversalError,
    WalkCancelled,
)
from .core.models import FileEntry, ParsedTemplate, RenderJob  # noqa: E402
from .filesystem import (  # noqa: E402
    FileSystem,
    MemoryFileSystem,
    OSFileSystem,
    ResourceFileSystem,
)
from .rendering import (  # noqa: E402
    TemplateDir,
    index_templates,
    parse_dir,
    parse_fs_dir,
    render_dir,
    render_fs_dir,
)

__all__ = [
    "DEFAULT_TEMPLATE_EXT",
    "CopyError",
    "FileEntry",
    "FileSystem",
    "MemoryFileSystem",
    "OSFileSystem",
    "OutputError",
    "ParsedTemplate",
    "ParserConfig",
    "RenderJob",
    "ResourceFileSystem",
    "TemplateDir",
    "TemplateExecutionError",
    "TemplateParseError",
    "TemplateReadError",
    "TemplateTreeError",
    "TraversalError",
    "WalkCancelled",
    "block_delims",
    "delims",
    "encoding",
    "ext",
    "index_templates",
    "modes",
    "parse_dir",
    "parse_fs_dir",
    "render_dir",
    "render_fs_dir",
    "whitespace",
]
