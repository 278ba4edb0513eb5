"""Unit tests for InfrastructureFactory."""

from file_utilities.infrastructure.console_adapter import ConsoleAdapter
from file_utilities.infrastructure.factory import InfrastructureFactory
from file_utilities.infrastructure.file_system_adapter import FileSystemAdapter
from file_utilities.infrastructure.settings import FileUtilitySettings
from file_utilities.infrastructure.simple_logger import SimpleLogger


class TestInfrastructureFactory:
    """Test adapter creation."""

    def test_create_file_system(self):
        """Test file system adapter creation."""
        assert isinstance(InfrastructureFactory.create_file_system(), FileSystemAdapter)

    def test_create_console(self):
        """Test console adapter creation."""
        assert isinstance(InfrastructureFactory.create_console(), ConsoleAdapter)

    def test_create_logger(self):
        """Test logger adapter creation with a name."""
        logger = InfrastructureFactory.create_logger("file_utilities.test.factory")
        assert isinstance(logger, SimpleLogger)
        assert logger.name == "file_utilities.test.factory"

    def test_create_settings_with_overrides(self):
        """Test settings creation honours overrides."""
        settings = InfrastructureFactory.create_settings(base_path="/srv", overwrite=True)
        assert isinstance(settings, FileUtilitySettings)
        assert settings.base_path == "/srv"
        assert settings.overwrite is True
