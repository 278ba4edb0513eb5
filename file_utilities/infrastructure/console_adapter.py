"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


class ConsoleAdapter:
    """Adapter for console operations using Rich library.

    Messages are wrapped in ``Text`` so file contents and paths are printed
    verbatim, without markup or emoji substitution.
    """

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console()

    def print(self, message: str, style: str | None = None) -> None:
        """Print a message to the console."""
        self._console.print(Text(message, style=style or ""), soft_wrap=True)

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(Text.assemble(("Error: ", "red bold"), message), soft_wrap=True)

    def print_success(self, message: str) -> None:
        """Print a success message to the console."""
        self._console.print(Text.assemble(("✓ ", "green"), message), soft_wrap=True)

    def print_table(
        self, headers: list[str], rows: list[list[str]], title: str | None = None
    ) -> None:
        """Print a formatted table to the console."""
        table = Table(title=title, box=box.SIMPLE)

        for header in headers:
            table.add_column(header)

        for row in rows:
            table.add_row(*row)

        self._console.print(table)
