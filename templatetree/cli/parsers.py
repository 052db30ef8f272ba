"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_assignment(value: str) -> tuple[str, str]:
    """Parse a data override in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key:
        raise typer.BadParameter(f"Empty key in: {value!r}")
    return key, raw


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_delims(left: str, right: str) -> tuple[str, str]:
    """Validate that delimiters are given together."""
    if bool(left) != bool(right):
        raise typer.BadParameter(
            "--left-delim and --right-delim must be given together"
        )
    return left, right
