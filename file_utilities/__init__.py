"""file-utilities - base-path-scoped file operations."""

from .application.file_utility import FileUtility
from .domain.exceptions import (
    AlreadyExistsError,
    FileIOError,
    FileUtilityError,
    NotFoundError,
    PermissionDeniedError,
)
from .domain.models import FileUtilityOptions
from .domain.services import PathBuilder, PathResolver, append_before_extension, build_path
from .infrastructure.settings import FileUtilitySettings

__all__ = [
    "AlreadyExistsError",
    "FileIOError",
    "FileUtility",
    "FileUtilityError",
    "FileUtilityOptions",
    "FileUtilitySettings",
    "NotFoundError",
    "PathBuilder",
    "PathResolver",
    "PermissionDeniedError",
    "append_before_extension",
    "build_path",
]
__version__ = "0.1.0"
