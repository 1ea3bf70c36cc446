"""Generator configuration from environment variables."""

from __future__ import annotations

import enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class OutputMode(str, enum.Enum):
    # One file per icon variant
    SPLIT = "split"
    # One SymbolsExtensions.kt per variance
    GROUPED = "grouped"


class Settings(BaseSettings):
    log_level: str = "info"
    output_mode: OutputMode = OutputMode.SPLIT

    # Holder written into the license header of every generated file
    copyright_holder: str = "The Compose Symbols Authors"

    # Only source files whose name contains this marker are processed
    size_marker: str = Field(default="24px", min_length=1)

    model_config = {
        "env_prefix": "SYMBOLGEN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().lower()


settings = Settings()
