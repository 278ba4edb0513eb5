"""File system adapter implementation."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def umask_cleared() -> Iterator[int]:
    """Clear the process umask for the duration of the block.

    Yields the previous umask, which is restored on exit whether or not the
    block raised.
    """
    previous = os.umask(0)
    try:
        yield previous
    finally:
        os.umask(previous)


class FileSystemAdapter:
    """Adapter for file system operations."""

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def is_readable(self, path: str) -> bool:
        """Check if path is readable by the current process."""
        return os.access(path, os.R_OK)

    def get_size(self, path: str) -> int:
        """Get file size in bytes."""
        try:
            return Path(path).stat().st_size
        except OSError as e:
            raise OSError(f"Unable to get size of {path}: {e}") from e

    def read_bytes(self, path: str) -> bytes:
        """Read contents of a file."""
        try:
            return Path(path).read_bytes()
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except PermissionError as e:
            raise PermissionError(f"Permission denied reading {path}") from e
        except OSError as e:
            raise OSError(f"Unable to read file {path}: {e}") from e

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write content to a file."""
        try:
            Path(path).write_bytes(content)
        except OSError as e:
            raise OSError(f"Unable to write file {path}: {e}") from e

    def delete_file(self, path: str) -> None:
        """Delete a file."""
        try:
            Path(path).unlink()
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except OSError as e:
            raise OSError(f"Unable to delete file {path}: {e}") from e

    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file to exactly destination, keeping its metadata.

        An existing directory at destination is an error, not a target to
        copy into.
        """
        try:
            shutil.copyfile(source, destination)
            shutil.copystat(source, destination)
        except FileNotFoundError as e:
            if Path(source).exists():
                raise OSError(f"Unable to copy file from {source} to {destination}: {e}") from e
            raise FileNotFoundError(f"Source file not found: {source}") from e
        except OSError as e:
            raise OSError(f"Unable to copy file from {source} to {destination}: {e}") from e

    def rename(self, source: str, destination: str) -> None:
        """Rename a file, replacing the destination if present."""
        os.replace(source, destination)

    def create_directory(self, path: str, mode: int = 0o755, recursive: bool = True) -> None:
        """Create a directory, applying mode to every directory created."""
        target = Path(path)
        if recursive:
            missing = []
            current = target
            while not current.exists() and current != current.parent:
                missing.append(current)
                current = current.parent
        else:
            missing = [target]

        try:
            with umask_cleared():
                for directory in reversed(missing):
                    directory.mkdir(mode=mode, exist_ok=True)
        except OSError as e:
            raise OSError(f"Unable to create directory {path}: {e}") from e
