"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..context import DataError, build_context
from ..core import config as options
from ..core.errors import TemplateTreeError
from ..filesystem import FileSystem, OSFileSystem, ResourceFileSystem
from ..rendering.engine import TemplateDir
from ..settings import Settings
from .parsers import parse_assignment, parse_delims, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="templatetree",
    help="Parse and render whole directory trees of Jinja2 templates.",
)

ExtOption = Annotated[
    Optional[str],
    typer.Option(
        "--ext",
        help="Template file extension, case-insensitive (default: .tmpl).",
        metavar="EXT",
    ),
]
LeftDelimOption = Annotated[
    Optional[str],
    typer.Option("--left-delim", help="Variable start delimiter.", metavar="TEXT"),
]
RightDelimOption = Annotated[
    Optional[str],
    typer.Option("--right-delim", help="Variable end delimiter.", metavar="TEXT"),
]
PackageOption = Annotated[
    Optional[str],
    typer.Option(
        "--package",
        help="Read SOURCE from the resources of an installed package.",
        metavar="PACKAGE",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _open_source(package: str | None) -> FileSystem:
    if package is None:
        return OSFileSystem()
    try:
        return ResourceFileSystem(package)
    except ModuleNotFoundError as e:
        raise typer.BadParameter(f"Unknown package: {package!r}") from e


def _build_options(
    settings: Settings,
    ext: str | None,
    left_delim: str | None,
    right_delim: str | None,
    file_mode: str | None = None,
    dir_mode: str | None = None,
) -> list[options.Option]:
    left, right = parse_delims(
        settings.left_delim if left_delim is None else left_delim,
        settings.right_delim if right_delim is None else right_delim,
    )
    return [
        options.ext(ext or settings.extension),
        options.delims(left, right),
        options.encoding(settings.encoding),
        options.modes(
            dir_mode=parse_file_mode(dir_mode or settings.dir_mode),
            file_mode=parse_file_mode(file_mode or settings.file_mode),
        ),
    ]


def _template_dir(
    source: str, package: str | None, opts: list[options.Option]
) -> TemplateDir:
    try:
        return TemplateDir(_open_source(package), source, *opts)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def parse(
    source: Annotated[str, typer.Argument(help="Template directory.")],
    ext: ExtOption = None,
    left_delim: LeftDelimOption = None,
    right_delim: RightDelimOption = None,
    package: PackageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Parse every template under SOURCE and print their names."""
    _configure_logging(verbose)

    settings = Settings()
    tdir = _template_dir(
        source, package, _build_options(settings, ext, left_delim, right_delim)
    )

    try:
        templates = tdir.parse()
    except TemplateTreeError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    for template in templates:
        typer.echo(template.name)


@app.command()
def render(
    source: Annotated[str, typer.Argument(help="Template directory.")],
    output: Annotated[Path, typer.Argument(help="Output directory.")],
    data_file: Annotated[
        Optional[Path],
        typer.Option(
            "--data",
            help="JSON or YAML file with the render data.",
            metavar="FILE",
        ),
    ] = None,
    assignments: Annotated[
        Optional[list[str]],
        typer.Option(
            "--set",
            help="Set a data value (format: KEY=VALUE, dotted keys allowed). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = None,
    include_env: Annotated[
        bool,
        typer.Option("--env", help="Expose the process environment as 'env'."),
    ] = False,
    ext: ExtOption = None,
    left_delim: LeftDelimOption = None,
    right_delim: RightDelimOption = None,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="Rendered file permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    dir_mode: Annotated[
        Optional[str],
        typer.Option(
            "--dir-mode",
            help="Created directory permissions in octal (default: 0755).",
            metavar="OCTAL",
        ),
    ] = None,
    package: PackageOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Only print what would be written."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Render templates under SOURCE into OUTPUT and copy all other files."""
    _configure_logging(verbose)

    settings = Settings()
    tdir = _template_dir(
        source,
        package,
        _build_options(settings, ext, left_delim, right_delim, file_mode, dir_mode),
    )

    if dry_run:
        try:
            jobs = tdir.plan(output)
        except TemplateTreeError as e:
            logger.error(str(e))
            raise typer.Exit(code=1) from e
        for job in jobs:
            action = "render" if job.is_template else "copy"
            typer.echo(f"{action} {job.source} -> {job.destination}")
        return

    overrides = [parse_assignment(value) for value in assignments or []]
    try:
        context = build_context(data_file, overrides, include_env=include_env)
    except DataError as e:
        raise typer.BadParameter(str(e)) from e

    logger.debug(f"Context keys: {sorted(context)}")

    try:
        jobs = tdir.render(output, context)
    except TemplateTreeError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(jobs)} file(s) written")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
