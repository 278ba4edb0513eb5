"""Infrastructure layer for file-utilities."""

from file_utilities.infrastructure.console_adapter import ConsoleAdapter
from file_utilities.infrastructure.factory import InfrastructureFactory
from file_utilities.infrastructure.file_system_adapter import FileSystemAdapter, umask_cleared
from file_utilities.infrastructure.settings import FileUtilitySettings
from file_utilities.infrastructure.simple_logger import SimpleLogger

__all__ = [
    "ConsoleAdapter",
    "FileSystemAdapter",
    "FileUtilitySettings",
    "InfrastructureFactory",
    "SimpleLogger",
    "umask_cleared",
]
