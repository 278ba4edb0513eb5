"""Domain layer for file-utilities - path rules, options and errors."""

from file_utilities.domain.exceptions import (
    AlreadyExistsError,
    FileIOError,
    FileUtilityError,
    NotFoundError,
    PathError,
    PermissionDeniedError,
)
from file_utilities.domain.models import FileUtilityOptions
from file_utilities.domain.services import (
    PathBuilder,
    PathResolver,
    append_before_extension,
    build_path,
)

__all__ = [
    # Exceptions
    "AlreadyExistsError",
    "FileIOError",
    "FileUtilityError",
    "NotFoundError",
    "PathError",
    "PermissionDeniedError",
    # Models
    "FileUtilityOptions",
    # Services
    "PathBuilder",
    "PathResolver",
    "append_before_extension",
    "build_path",
]
