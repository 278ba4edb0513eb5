"""Ports (interfaces) for file-utilities following hexagonal architecture."""

from file_utilities.ports.console import ConsolePort
from file_utilities.ports.file_system import FileSystemPort
from file_utilities.ports.logger import LoggerPort

__all__ = [
    "ConsolePort",
    "FileSystemPort",
    "LoggerPort",
]
