"""Pytest configuration and shared fixtures for file-utilities tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from file_utilities.application.file_utility import FileUtility
from file_utilities.ports.logger import LoggerPort


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary base directory for testing.

    Yields:
        Path to the temporary directory
    """
    base = tmp_path / "file-utilities-test"
    base.mkdir()
    yield base


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create a mock logger adapter.

    Returns:
        A mocked logger satisfying LoggerPort
    """
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def mock_file_system() -> MagicMock:
    """Create a mock file system adapter.

    Returns:
        A mocked file system adapter describing an empty disk
    """
    mock = MagicMock()
    mock.exists = MagicMock(return_value=False)
    mock.is_directory = MagicMock(return_value=True)
    mock.is_readable = MagicMock(return_value=True)
    mock.get_size = MagicMock(return_value=1024)
    mock.read_bytes = MagicMock(return_value=b"test content")
    mock.write_bytes = MagicMock()
    mock.delete_file = MagicMock()
    mock.copy_file = MagicMock()
    mock.rename = MagicMock()
    mock.create_directory = MagicMock()
    return mock


@pytest.fixture
def file_utility(temp_dir: Path, mock_logger: MagicMock) -> FileUtility:
    """Create a FileUtility rooted at the temporary directory.

    Returns:
        A FileUtility using the real file system adapter
    """
    return FileUtility(str(temp_dir), logger=mock_logger)
