from .engine import (
    TemplateDir,
    index_templates,
    parse_dir,
    parse_fs_dir,
    render_dir,
    render_fs_dir,
)

__all__ = [
    "TemplateDir",
    "index_templates",
    "parse_dir",
    "parse_fs_dir",
    "render_dir",
    "render_fs_dir",
]
