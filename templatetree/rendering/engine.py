"""Template tree engine: parse a directory of templates or render it."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from jinja2 import Environment

from ..core.config import Option, ParserConfig
from ..core.errors import (
    CopyError,
    OutputError,
    TemplateExecutionError,
    TemplateTreeError,
)
from ..core.models import FileEntry, ParsedTemplate, RenderJob, as_context
from ..filesystem.base import FileSystem
from ..filesystem.osfs import OSFileSystem
from ..paths import destination_path
from ..walking.filters import matches_extension
from ..walking.walker import walk_entries
from .io import atomic_write_stream, ensure_parent
from .loader import build_environment, load_template

logger = logging.getLogger(__name__)


class TemplateDir:
    """A directory of templates on some file system.

    Files whose extension matches the configured one are templates, named
    after their full path. Everything else is an asset: ignored by
    :meth:`parse`, copied verbatim by :meth:`render`.
    """

    def __init__(self, fs: FileSystem, root: str, *options: Option) -> None:
        self.fs = fs
        self.config = ParserConfig.build(root, *options)

    @classmethod
    def from_path(cls, root: str | os.PathLike[str], *options: Option) -> TemplateDir:
        """Template directory on the local disk."""
        return cls(OSFileSystem(), os.fspath(root), *options)

    @property
    def root(self) -> str:
        return self.config.root

    def _is_template(self, entry: FileEntry) -> bool:
        return matches_extension(entry.path, self.config.extension)

    def _job(self, entry: FileEntry, output_dir: str | Path) -> RenderJob:
        is_template = self._is_template(entry)
        destination = destination_path(
            entry.path,
            self.root,
            output_dir,
            self.fs.sep,
            strip_ext=self.config.extension if is_template else None,
        )
        return RenderJob(
            source=entry.path, destination=destination, is_template=is_template
        )

    def parse(self, cancel: threading.Event | None = None) -> list[ParsedTemplate]:
        """Parse every template under the root, recursively.

        Either every matching file compiles and the whole list is returned,
        or the first failure is raised and nothing is returned.

        Args:
            cancel: Optional cancellation flag, checked per directory

        Returns:
            Parsed templates in walk order
        """
        logger.debug(f"Parsing templates in {self.root}")

        env = build_environment(self.config, self.fs)
        templates = [
            load_template(env, entry.path)
            for entry in walk_entries(self.fs, self.root, cancel)
            if self._is_template(entry)
        ]

        logger.info(f"Parsed {len(templates)} template(s) from {self.root}")
        return templates

    def plan(
        self, output_dir: str | Path, cancel: threading.Event | None = None
    ) -> list[RenderJob]:
        """List what :meth:`render` would do, without reading file contents."""
        return [
            self._job(entry, output_dir)
            for entry in walk_entries(self.fs, self.root, cancel)
        ]

    def render(
        self,
        output_dir: str | Path,
        data: Any = None,
        cancel: threading.Event | None = None,
    ) -> list[RenderJob]:
        """Render templates into *output_dir* and copy every other file.

        ``src/xx.md.tmpl`` becomes ``out/xx.md``; ``src/logo.png`` is copied
        to ``out/logo.png``. Existing output files are overwritten. The
        first error stops the pass; files already written stay in place.

        Args:
            output_dir: Root of the output tree
            data: Value passed to every template
            cancel: Optional cancellation flag, checked per directory

        Returns:
            Completed render jobs in walk order
        """
        logger.info(f"Rendering {self.root} → {output_dir}")

        env = build_environment(self.config, self.fs)
        context = as_context(data)
        jobs: list[RenderJob] = []

        for entry in walk_entries(self.fs, self.root, cancel):
            job = self._job(entry, output_dir)
            if job.is_template:
                self._render_one(env, job, context)
            else:
                self._copy_one(job)
            jobs.append(job)

        logger.info(f"Successfully rendered {len(jobs)} file(s)")
        return jobs

    def _make_parent(self, job: RenderJob) -> None:
        try:
            ensure_parent(job.destination, self.config.dir_mode)
        except OSError as exc:
            raise OutputError(
                job.destination.parent, f"cannot create directory: {exc}"
            ) from exc

    def _render_one(
        self, env: Environment, job: RenderJob, context: dict[str, Any]
    ) -> None:
        parsed = load_template(env, job.source)
        self._make_parent(job)

        try:
            atomic_write_stream(
                job.destination,
                _generate(parsed, context),
                mode=self.config.file_mode,
                encoding=self.config.encoding,
            )
        except OSError as exc:
            raise OutputError(job.destination, f"cannot write output: {exc}") from exc

        logger.info(f"Rendered {job.source} → {job.destination}")

    def _copy_one(self, job: RenderJob) -> None:
        self._make_parent(job)

        try:
            self.fs.copy_file(job.source, job.destination)
        except (OSError, ValueError) as exc:
            raise CopyError(job.source, f"cannot copy to {job.destination}: {exc}") from exc

        logger.info(f"Copied {job.source} → {job.destination}")


def _generate(parsed: ParsedTemplate, context: dict[str, Any]) -> Iterator[str]:
    try:
        yield from parsed.template.generate(context)
    except TemplateTreeError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise TemplateExecutionError(parsed.name, str(exc)) from exc


def parse_dir(
    root: str | os.PathLike[str],
    *options: Option,
    cancel: threading.Event | None = None,
) -> list[ParsedTemplate]:
    """Parse all templates under a local directory."""
    return TemplateDir.from_path(root, *options).parse(cancel)


def parse_fs_dir(
    fs: FileSystem,
    root: str,
    *options: Option,
    cancel: threading.Event | None = None,
) -> list[ParsedTemplate]:
    """Parse all templates under *root* in a virtual file system."""
    return TemplateDir(fs, root, *options).parse(cancel)


def render_dir(
    root: str | os.PathLike[str],
    output_dir: str | Path,
    data: Any = None,
    *options: Option,
    cancel: threading.Event | None = None,
) -> list[RenderJob]:
    """Render a local template directory into *output_dir*."""
    return TemplateDir.from_path(root, *options).render(output_dir, data, cancel)


def render_fs_dir(
    fs: FileSystem,
    root: str,
    output_dir: str | Path,
    data: Any = None,
    *options: Option,
    cancel: threading.Event | None = None,
) -> list[RenderJob]:
    """Render a template directory from a virtual file system to local disk."""
    return TemplateDir(fs, root, *options).render(output_dir, data, cancel)


def index_templates(
    templates: Iterable[ParsedTemplate], *, absolute: bool = False
) -> dict[str, ParsedTemplate]:
    """Key parsed templates by name.

    Args:
        templates: Result of a parse pass
        absolute: Key by absolute local path instead (local directories only)

    Returns:
        Mapping of name (or absolute path) to template
    """
    return {
        (os.path.abspath(t.name) if absolute else t.name): t for t in templates
    }
