"""Simple logger implementation over the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort


class SimpleLogger(LoggerPort):
    """Logger implementation using Python's standard logging.

    Keyword arguments passed to the log methods are attached to the record
    through ``extra``.
    """

    def __init__(self, name: str = "file_utilities", level: int | str | None = None):
        """Initialize the logger.

        Args:
            name: Logger name (default: "file_utilities")
            level: Logging level or level name. When omitted, a level already
                set on the named logger is kept, otherwise INFO is used.
        """
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level)
        elif self._logger.level == logging.NOTSET:
            self._logger.setLevel(logging.INFO)

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        """Get the underlying logger name."""
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._logger.error(message, extra=kwargs)
