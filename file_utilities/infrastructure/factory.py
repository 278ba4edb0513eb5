"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from rich.console import Console

from file_utilities.infrastructure.console_adapter import ConsoleAdapter
from file_utilities.infrastructure.file_system_adapter import FileSystemAdapter
from file_utilities.infrastructure.settings import FileUtilitySettings
from file_utilities.infrastructure.simple_logger import SimpleLogger
from file_utilities.ports.console import ConsolePort
from file_utilities.ports.file_system import FileSystemPort
from file_utilities.ports.logger import LoggerPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_file_system() -> FileSystemPort:
        """Create a file system adapter.

        Returns:
            FileSystemPort implementation
        """
        return FileSystemAdapter()

    @staticmethod
    def create_logger(name: str = "file_utilities", level: int | str | None = None) -> LoggerPort:
        """Create a logger adapter.

        Args:
            name: Logger name
            level: Logging level or level name; None keeps the current level

        Returns:
            LoggerPort implementation
        """
        return SimpleLogger(name, level)

    @staticmethod
    def create_settings(**overrides) -> FileUtilitySettings:
        """Load settings from the environment.

        Args:
            **overrides: Values taking precedence over the environment

        Returns:
            Loaded settings
        """
        return FileUtilitySettings(**overrides)
