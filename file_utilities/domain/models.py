"""Domain models for file utility configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FileUtilityOptions(BaseModel):
    """Value object holding the policy options of a FileUtility.

    Unknown keys are accepted and kept so callers can carry their own
    settings alongside the recognised ones.
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
    )

    create_directories: bool = Field(
        default=True,
        description="Create missing parent directories on write, copy and move",
    )
    overwrite: bool = Field(
        default=False,
        description="Allow write to replace an existing file",
    )

    @classmethod
    def from_value(cls, value: FileUtilityOptions | Mapping[str, Any] | None) -> FileUtilityOptions:
        """Build options from a mapping merged over the defaults."""
        if value is None:
            return cls()
        if isinstance(value, FileUtilityOptions):
            return value.model_copy()
        return cls(**dict(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get an option value, falling back to ``default`` when unset."""
        data = self.model_dump()
        value = data.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Set an option value; unknown keys are stored as extras."""
        setattr(self, key, value)
