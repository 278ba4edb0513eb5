"""Environment-driven settings for file-utilities."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.models import FileUtilityOptions


class FileUtilitySettings(BaseSettings):
    """Settings read from ``FILE_UTILITIES_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="FILE_UTILITIES_",
        env_file=".env",
        extra="ignore",
    )

    base_path: str = Field(default="", description="Base directory; empty means cwd")
    create_directories: bool = Field(default=True, description="Create missing parents")
    overwrite: bool = Field(default=False, description="Allow replacing existing files")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    def to_options(self) -> FileUtilityOptions:
        """Convert to FileUtility options."""
        return FileUtilityOptions(
            create_directories=self.create_directories,
            overwrite=self.overwrite,
        )
