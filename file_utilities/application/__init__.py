"""Application layer for file-utilities - the FileUtility facade."""

from file_utilities.application.file_utility import DEFAULT_DIRECTORY_MODE, FileUtility

__all__ = [
    "DEFAULT_DIRECTORY_MODE",
    "FileUtility",
]
