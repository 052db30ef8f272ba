from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.config import (
    DEFAULT_DIR_MODE,
    DEFAULT_FILE_MODE,
    DEFAULT_TEMPLATE_EXT,
    normalize_extension,
)


class Settings(BaseSettings):
    """CLI defaults, read from ``TEMPLATETREE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="TEMPLATETREE_", case_sensitive=False)

    extension: str = DEFAULT_TEMPLATE_EXT
    left_delim: str = ""
    right_delim: str = ""
    encoding: str = "utf-8"
    dir_mode: str = oct(DEFAULT_DIR_MODE)[2:].zfill(4)
    file_mode: str = oct(DEFAULT_FILE_MODE)[2:].zfill(4)

    @field_validator("extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        return normalize_extension(value)
