"""Domain models produced while walking, parsing and rendering a tree."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Template
from pydantic import BaseModel, ConfigDict, Field


class FileEntry(BaseModel):
    """A single directory entry seen during a walk."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Full path, prefixed with the walk root")
    is_dir: bool = Field(default=False, description="Whether the entry is a directory")


class RenderJob(BaseModel):
    """What a render pass does with one source file."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Source file path")
    destination: Path = Field(..., description="Output file path")
    is_template: bool = Field(..., description="Render (True) or copy (False)")


def as_context(data: Any) -> dict[str, Any]:
    """Turn a caller-supplied data value into a Jinja2 context.

    Mappings are used as-is, pydantic models and dataclasses are dumped to
    dicts, and anything else is exposed under the ``data`` name.
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if isinstance(data, BaseModel):
        return data.model_dump()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    return {"data": data}


class ParsedTemplate(BaseModel):
    """A compiled template named after the file it came from."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Full path of the template file")
    template: Template = Field(..., description="Compiled Jinja2 template")

    def render(self, data: Any = None) -> str:
        return self.template.render(as_context(data))

    def stream(self, data: Any = None) -> Iterator[str]:
        """Yield the rendered output chunk by chunk."""
        return self.template.generate(as_context(data))
