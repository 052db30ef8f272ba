"""Parser configuration and option builders."""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_TEMPLATE_EXT = ".tmpl"
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644


def normalize_extension(value: str) -> str:
    """Lower-case an extension and make sure it starts with a dot."""
    value = value.strip().lower()
    if value and not value.startswith("."):
        value = f".{value}"
    return value


class ParserConfig(BaseModel):
    """Settings shared by every step of a parse or render pass."""

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., description="Directory (or file) holding the templates")
    extension: str = Field(
        default=DEFAULT_TEMPLATE_EXT, description="Template file extension"
    )
    left_delim: str = Field(default="", description="Variable start string")
    right_delim: str = Field(default="", description="Variable end string")
    block_left_delim: str = Field(default="", description="Block start string")
    block_right_delim: str = Field(default="", description="Block end string")
    encoding: str = Field(default="utf-8", description="Template text encoding")
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    dir_mode: int = Field(
        default=DEFAULT_DIR_MODE, description="Permissions of created directories"
    )
    file_mode: int = Field(
        default=DEFAULT_FILE_MODE, description="Permissions of rendered files"
    )

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        value = normalize_extension(value)
        if not value or value == ".":
            raise ValueError("extension must not be empty")
        return value

    @model_validator(mode="after")
    def _check_delimiter_pairs(self) -> ParserConfig:
        if bool(self.left_delim) != bool(self.right_delim):
            raise ValueError("left_delim and right_delim must be set together")
        if bool(self.block_left_delim) != bool(self.block_right_delim):
            raise ValueError(
                "block_left_delim and block_right_delim must be set together"
            )
        return self

    @property
    def has_delims(self) -> bool:
        return bool(self.left_delim and self.right_delim)

    @property
    def has_block_delims(self) -> bool:
        return bool(self.block_left_delim and self.block_right_delim)

    @classmethod
    def build(cls, root: str, *options: Option) -> ParserConfig:
        """Create a config for *root* and apply *options* in order."""
        config = cls(root=str(root))
        for option in options:
            config = option(config)
        return config


Option = Callable[[ParserConfig], ParserConfig]


def _update(config: ParserConfig, **changes: object) -> ParserConfig:
    # model_copy skips validation, so round-trip through the constructor.
    return ParserConfig(**{**config.model_dump(), **changes})


def ext(value: str) -> Option:
    """Set the template file extension (matched case-insensitively)."""

    def apply(config: ParserConfig) -> ParserConfig:
        return _update(config, extension=value)

    return apply


def delims(left: str, right: str) -> Option:
    """Override the variable delimiters, ``{{`` and ``}}`` by default.

    Empty strings restore the defaults.
    """

    def apply(config: ParserConfig) -> ParserConfig:
        return _update(config, left_delim=left, right_delim=right)

    return apply


def block_delims(left: str, right: str) -> Option:
    """Override the block delimiters, ``{%`` and ``%}`` by default."""

    def apply(config: ParserConfig) -> ParserConfig:
        return _update(config, block_left_delim=left, block_right_delim=right)

    return apply


def encoding(value: str) -> Option:
    def apply(config: ParserConfig) -> ParserConfig:
        return _update(config, encoding=value)

    return apply


def whitespace(*, trim_blocks: bool, lstrip_blocks: bool) -> Option:
    def apply(config: ParserConfig) -> ParserConfig:
        return _update(config, trim_blocks=trim_blocks, lstrip_blocks=lstrip_blocks)

    return apply


def modes(*, dir_mode: int | None = None, file_mode: int | None = None) -> Option:
    """Set permissions for created directories and rendered files."""

    def apply(config: ParserConfig) -> ParserConfig:
        changes: dict[str, int] = {}
        if dir_mode is not None:
            changes["dir_mode"] = dir_mode
        if file_mode is not None:
            changes["file_mode"] = file_mode
        return _update(config, **changes)

    return apply
