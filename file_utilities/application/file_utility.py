"""FileUtility - base-path-scoped file operations.

Every operation resolves its paths against the configured base directory,
delegates to a FileSystemPort and translates ``OSError`` into the domain
error kinds. Error messages always carry the resolved path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from file_utilities.domain.exceptions import (
    AlreadyExistsError,
    FileIOError,
    FileUtilityError,
    NotFoundError,
    PermissionDeniedError,
)
from file_utilities.domain.models import FileUtilityOptions
from file_utilities.domain.services import PathResolver, StrPath
from file_utilities.infrastructure.factory import InfrastructureFactory
from file_utilities.infrastructure.settings import FileUtilitySettings
from file_utilities.ports.file_system import FileSystemPort
from file_utilities.ports.logger import LoggerPort

DEFAULT_DIRECTORY_MODE = 0o755


class FileUtility:
    """Main file operations utility class."""

    def __init__(
        self,
        base_path: StrPath = "",
        options: FileUtilityOptions | Mapping[str, Any] | None = None,
        *,
        file_system: FileSystemPort | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the utility.

        Args:
            base_path: Base directory for file operations (default: cwd)
            options: Option overrides merged over the defaults
            file_system: File system adapter (default: FileSystemAdapter)
            logger: Logger adapter (default: SimpleLogger)
        """
        self._base_path = os.fspath(base_path) or os.getcwd()
        self._options = FileUtilityOptions.from_value(options)
        self._file_system = file_system or InfrastructureFactory.create_file_system()
        self._logger = logger or InfrastructureFactory.create_logger()
        self._resolver = PathResolver(self._base_path)

    @classmethod
    def from_settings(
        cls,
        settings: FileUtilitySettings | None = None,
        *,
        file_system: FileSystemPort | None = None,
        logger: LoggerPort | None = None,
    ) -> FileUtility:
        """Create a utility configured from environment settings."""
        settings = settings or InfrastructureFactory.create_settings()
        return cls(
            settings.base_path,
            settings.to_options(),
            file_system=file_system,
            logger=logger or InfrastructureFactory.create_logger(level=settings.log_level),
        )

    # Configuration

    @property
    def base_path(self) -> str:
        """Get the base path."""
        return self._base_path

    @property
    def options(self) -> FileUtilityOptions:
        """Get the current options."""
        return self._options

    def get_base_path(self) -> str:
        """Get the base path."""
        return self._base_path

    def set_option(self, key: str, value: Any) -> FileUtility:
        """Set a configuration option.

        Args:
            key: Option key
            value: Option value

        Returns:
            This utility, for chaining
        """
        self._options.set(key, value)
        return self

    def get_option(self, key: str, default: Any = None) -> Any:
        """Get a configuration option."""
        return self._options.get(key, default)

    def resolve_path(self, path: StrPath) -> str:
        """Resolve path relative to the base path."""
        return self._resolver.resolve(path)

    # File info

    def exists(self, path: StrPath) -> bool:
        """Check if a file or directory exists."""
        return self._file_system.exists(self.resolve_path(path))

    def size(self, path: StrPath) -> int:
        """Get file size in bytes.

        Raises:
            NotFoundError: If the file doesn't exist
            FileIOError: If the size cannot be determined
        """
        full_path = self.resolve_path(path)
        if not self._file_system.exists(full_path):
            raise self._failed(NotFoundError(full_path, operation="size"))
        try:
            return self._file_system.get_size(full_path)
        except OSError as e:
            raise self._failed(
                FileIOError(f"Failed to get file size: {full_path}", full_path, "size"), e
            ) from e

    # File operations

    def read_bytes(self, path: StrPath) -> bytes:
        """Read raw file contents.

        Args:
            path: File path (relative to base path or absolute)

        Returns:
            File contents

        Raises:
            NotFoundError: If the file doesn't exist
            PermissionDeniedError: If the file is not readable
            FileIOError: If the read fails
        """
        full_path = self.resolve_path(path)
        if not self._file_system.exists(full_path):
            raise self._failed(NotFoundError(full_path, operation="read"))
        if not self._file_system.is_readable(full_path):
            raise self._failed(PermissionDeniedError(full_path))
        try:
            return self._file_system.read_bytes(full_path)
        except PermissionError as e:
            raise self._failed(PermissionDeniedError(full_path), e) from e
        except OSError as e:
            raise self._failed(
                FileIOError(f"Failed to read file: {full_path}", full_path, "read"), e
            ) from e

    def read(self, path: StrPath, encoding: str = "utf-8") -> str:
        """Read file contents as text.

        Raises:
            NotFoundError: If the file doesn't exist
            PermissionDeniedError: If the file is not readable
            FileIOError: If the read or decoding fails
        """
        contents = self.read_bytes(path)
        try:
            return contents.decode(encoding)
        except UnicodeDecodeError as e:
            full_path = self.resolve_path(path)
            raise self._failed(
                FileIOError(f"Failed to decode file as {encoding}: {full_path}", full_path, "read"),
                e,
            ) from e

    def write(self, path: StrPath, contents: str | bytes, encoding: str = "utf-8") -> bool:
        """Write contents to a file.

        Args:
            path: File path
            contents: Text (encoded with ``encoding``) or bytes

        Returns:
            True on success

        Raises:
            AlreadyExistsError: If the file exists and overwrite is disabled
            FileIOError: If the parent directory or the file cannot be written
        """
        full_path = self.resolve_path(path)
        if self._file_system.exists(full_path) and not self._options.overwrite:
            raise self._failed(AlreadyExistsError(full_path))

        self._ensure_parent(full_path, False)

        data = contents.encode(encoding) if isinstance(contents, str) else bytes(contents)
        try:
            self._file_system.write_bytes(full_path, data)
        except OSError as e:
            raise self._failed(
                FileIOError(f"Failed to write file: {full_path}", full_path, "write"), e
            ) from e

        self._logger.debug("Wrote file", path=full_path, size=len(data))
        return True

    def delete(self, path: StrPath) -> bool:
        """Delete a file; deleting a missing file succeeds.

        Raises:
            FileIOError: If deletion fails
        """
        return self._delete_resolved(self.resolve_path(path))

    def copy(self, source: StrPath, destination: StrPath, create_dest: bool = False) -> bool:
        """Copy a file.

        The destination is the target file path. An existing directory there
        makes the copy fail rather than receive the file.

        Args:
            source: Source file path (relative or absolute)
            destination: Destination file path
            create_dest: Create the destination directory even when the
                ``create_directories`` option is off

        Raises:
            NotFoundError: If the source doesn't exist
            FileIOError: If the copy fails
        """
        source_path = self.resolve_path(source)
        dest_path = self.resolve_path(destination)

        if not self._file_system.exists(source_path):
            raise self._failed(NotFoundError(source_path, operation="copy", label="Source file"))

        self._ensure_parent(dest_path, create_dest)
        return self._copy_resolved(source_path, dest_path)

    def move(self, source: StrPath, destination: StrPath, create_dest: bool = False) -> bool:
        """Move a file, trying an atomic rename before copy and delete.

        Raises:
            NotFoundError: If the source doesn't exist
            FileIOError: If both the rename and the fallback fail
        """
        return self._move_resolved(
            self.resolve_path(source), self.resolve_path(destination), create_dest
        )

    def rename(self, source: StrPath, new_name: StrPath) -> bool:
        """Rename a file in place, keeping its directory."""
        source_path = self.resolve_path(source)
        directory = os.path.dirname(source_path)
        dest_path = directory + os.sep + os.path.basename(os.fspath(new_name))
        return self._move_resolved(source_path, dest_path, False)

    def mkdir(self, path: StrPath, mode: int | None = None, recursive: bool = True) -> bool:
        """Ensure a directory exists.

        The directory is created with exactly ``mode`` (default 0o755); the
        process umask is cleared while it is created.

        Raises:
            FileIOError: If the directory cannot be created
        """
        mode = DEFAULT_DIRECTORY_MODE if mode is None else mode
        return self._mkdir_resolved(self.resolve_path(path), mode, recursive)

    # Operations on already-resolved paths

    def _delete_resolved(self, full_path: str) -> bool:
        if not self._file_system.exists(full_path):
            return True
        try:
            self._file_system.delete_file(full_path)
        except OSError as e:
            raise self._failed(
                FileIOError(f"Failed to delete file: {full_path}", full_path, "delete"), e
            ) from e

        self._logger.debug("Deleted file", path=full_path)
        return True

    def _copy_resolved(self, source_path: str, dest_path: str) -> bool:
        try:
            self._file_system.copy_file(source_path, dest_path)
        except OSError as e:
            error = FileIOError(
                f"Failed to copy file from {source_path} to {dest_path}", source_path, "copy"
            )
            error.details["destination"] = dest_path
            raise self._failed(error, e) from e

        self._logger.debug("Copied file", source=source_path, destination=dest_path)
        return True

    def _move_resolved(self, source_path: str, dest_path: str, create_dest: bool) -> bool:
        if not self._file_system.exists(source_path):
            raise self._failed(NotFoundError(source_path, operation="move", label="Source file"))

        self._ensure_parent(dest_path, create_dest)

        try:
            self._file_system.rename(source_path, dest_path)
        except OSError as e:
            self._logger.warning(
                "Rename failed, falling back to copy and delete",
                source=source_path,
                destination=dest_path,
                reason=str(e),
            )
        else:
            self._logger.debug("Moved file", source=source_path, destination=dest_path)
            return True

        # The copy is not verified before the source is removed.
        self._copy_resolved(source_path, dest_path)
        self._delete_resolved(source_path)
        return True

    def _mkdir_resolved(self, full_path: str, mode: int, recursive: bool) -> bool:
        if self._file_system.is_directory(full_path):
            return True

        try:
            self._file_system.create_directory(full_path, mode, recursive)
        except OSError as e:
            if not self._file_system.is_directory(full_path):
                raise self._failed(
                    FileIOError(f"Failed to create directory: {full_path}", full_path, "mkdir"), e
                ) from e

        self._logger.debug("Created directory", path=full_path, mode=oct(mode))
        return True

    def _ensure_parent(self, path: str, create: bool) -> None:
        directory = os.path.dirname(path)
        if not self._file_system.is_directory(directory) and (
            create or self._options.create_directories
        ):
            self._mkdir_resolved(directory, DEFAULT_DIRECTORY_MODE, True)

    def _failed(self, error: FileUtilityError, cause: Exception | None = None) -> FileUtilityError:
        # Failed preconditions are the caller's to report; OS failures are logged here.
        if cause is None:
            self._logger.debug(error.message, **error.details)
        else:
            self._logger.error(error.message, reason=str(cause), **error.details)
        return error
