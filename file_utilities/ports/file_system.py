"""File system port for the OS primitives used by FileUtility."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations.

    Implementations receive resolved paths and raise ``OSError`` subclasses;
    mapping those onto domain errors is the caller's job.
    """

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check

        Returns:
            True if a file or directory exists at path
        """
        ...

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory.

        Args:
            path: Path to check

        Returns:
            True if directory, False otherwise
        """
        ...

    def is_readable(self, path: str) -> bool:
        """Check if the current process may read path.

        Args:
            path: Path to check

        Returns:
            True if readable, False otherwise
        """
        ...

    def get_size(self, path: str) -> int:
        """Get the size of a file in bytes.

        Args:
            path: File path

        Returns:
            Size in bytes

        Raises:
            OSError: If the size cannot be determined
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read the whole contents of a file.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            OSError: If unable to read file
        """
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write content to a file, creating or truncating it.

        Args:
            path: File path
            content: Content to write

        Raises:
            OSError: If unable to write file
        """
        ...

    def delete_file(self, path: str) -> None:
        """Delete a file.

        Args:
            path: File path to delete

        Raises:
            OSError: If unable to delete file
        """
        ...

    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file.

        Args:
            source: Source file path
            destination: Destination file path

        Raises:
            OSError: If unable to copy file
        """
        ...

    def rename(self, source: str, destination: str) -> None:
        """Atomically rename a file.

        Args:
            source: Source file path
            destination: Destination file path

        Raises:
            OSError: If the rename fails, e.g. across devices
        """
        ...

    def create_directory(self, path: str, mode: int = 0o755, recursive: bool = True) -> None:
        """Create a directory with exactly the requested mode.

        Args:
            path: Directory path
            mode: Permission bits applied with the umask cleared
            recursive: Create missing parents as well

        Raises:
            OSError: If unable to create directory
        """
        ...
