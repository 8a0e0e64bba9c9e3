"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IconConversionConfig(BaseModel):
    """Validated input for a directory-to-module icon conversion."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path
    output_path: Path
    icon_prefix: str = "app"
    icon_set_name: str = Field(default="Custom SVG Icons", min_length=1)

    @field_validator("source_dir")
    @classmethod
    def _validate_source_dir(cls, value: Path) -> Path:
        if not value.exists():
            raise ValueError(f"Source directory {value} does not exist")
        if not value.is_dir():
            raise ValueError(f"Source path {value} is not a directory")
        return value

    @field_validator("output_path")
    @classmethod
    def _validate_output_path(cls, value: Path) -> Path:
        if value.exists() and not value.is_dir():
            raise ValueError(f"Output path {value} exists and is not a directory")
        return value

    @field_validator("icon_prefix")
    @classmethod
    def _strip_prefix(cls, value: str) -> str:
        return value.strip()

    @field_validator("icon_set_name")
    @classmethod
    def _validate_icon_set_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("icon_set_name cannot be blank.")
        if "*/" in value or "\n" in value:
            raise ValueError("icon_set_name must be a single line without '*/'.")
        return value
