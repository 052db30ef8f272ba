from __future__ import annotations

from pathlib import Path

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe\x00"


def write_tree(root: Path, files: dict[str, bytes | str]) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
    return root


@pytest.fixture
def markdown_tree(tmp_path: Path) -> Path:
    """A manual split into chapters, plus an image asset."""
    return write_tree(
        tmp_path / "markdown",
        {
            "title.md.tmpl": "# {{ Title }}\n\nBy {{ Author }}\n",
            "chapters/00-about.md.tmpl": "## About\n\n{{ About }}\n",
            "chapters/01-installation.md.tmpl": "## Installation\n\n{{ Installation }}\n",
            "chapters/02-usage.md.tmpl": "## Usage\n",
            "images/logo.png": PNG_BYTES,
            "README": "not a template {{ left alone }}",
        },
    )


@pytest.fixture
def manual() -> dict[str, str]:
    return {
        "Title": "templatetree Manual",
        "Author": "Frank Xu",
        "About": "Parse and render directory trees of templates.",
        "Installation": "pip install templatetree",
    }
