"""Jinja2 environment and template loading over a :class:`FileSystem`."""

from __future__ import annotations

import logging
from typing import Callable

from jinja2 import (
    BaseLoader,
    Environment,
    StrictUndefined,
    TemplateSyntaxError,
)

from ..core.config import ParserConfig
from ..core.errors import TemplateParseError, TemplateReadError
from ..core.models import ParsedTemplate
from ..filesystem.base import FileSystem

logger = logging.getLogger(__name__)


class TreeLoader(BaseLoader):
    """Load template sources by full path from a file system.

    Templates are looked up by the same name they are parsed under, so one
    template can ``{% include %}`` another by its full path.
    """

    def __init__(self, fs: FileSystem, encoding: str = "utf-8") -> None:
        self.fs = fs
        self.encoding = encoding

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str, Callable[[], bool] | None]:
        try:
            data = self.fs.read_bytes(template)
        except (OSError, ValueError) as exc:
            raise TemplateReadError(template, f"cannot read template: {exc}") from exc

        try:
            source = data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise TemplateReadError(
                template, f"cannot decode template as {self.encoding}: {exc}"
            ) from exc

        return source, template, None


def build_environment(config: ParserConfig, fs: FileSystem) -> Environment:
    """Create the Jinja2 environment for one parse or render pass.

    Args:
        config: Parser configuration (delimiters, whitespace control)
        fs: File system templates are read from

    Returns:
        Environment whose loader resolves full template paths
    """
    options: dict[str, object] = {}
    if config.has_delims:
        options["variable_start_string"] = config.left_delim
        options["variable_end_string"] = config.right_delim
    if config.has_block_delims:
        options["block_start_string"] = config.block_left_delim
        options["block_end_string"] = config.block_right_delim

    return Environment(
        loader=TreeLoader(fs, config.encoding),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=True,
        **options,
    )


def load_template(env: Environment, name: str) -> ParsedTemplate:
    """Read and compile the template file at *name*.

    Raises:
        TemplateReadError: File could not be read or decoded
        TemplateParseError: Template body has a syntax error
    """
    logger.debug(f"Loading template: {name}")
    try:
        template = env.get_template(name)
    except TemplateSyntaxError as exc:
        raise TemplateParseError(name, exc.message or str(exc), exc.lineno) from exc

    return ParsedTemplate(name=name, template=template)
