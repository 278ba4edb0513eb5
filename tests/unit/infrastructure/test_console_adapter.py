"""Unit tests for ConsoleAdapter."""

from io import StringIO

from rich.console import Console

from file_utilities.infrastructure.console_adapter import ConsoleAdapter
from file_utilities.ports.console import ConsolePort


class TestConsoleAdapter:
    """Test ConsoleAdapter implementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.output = StringIO()
        self.adapter = ConsoleAdapter(Console(file=self.output, width=120, color_system=None))

    def test_implements_console_port(self):
        """Test that ConsoleAdapter implements ConsolePort interface."""
        assert isinstance(self.adapter, ConsolePort)

    def test_print_is_verbatim(self):
        """Test markup-like text is printed as-is."""
        self.adapter.print("[bold]not markup[/bold] :smile:")
        assert self.output.getvalue() == "[bold]not markup[/bold] :smile:\n"

    def test_print_with_style(self):
        """Test styled print still outputs the message."""
        self.adapter.print("hello", style="cyan")
        assert "hello" in self.output.getvalue()

    def test_print_error(self):
        """Test error prefix."""
        self.adapter.print_error("File not found: /base/a.txt")
        assert self.output.getvalue() == "Error: File not found: /base/a.txt\n"

    def test_print_success(self):
        """Test success prefix."""
        self.adapter.print_success("Wrote a.txt")
        assert self.output.getvalue() == "✓ Wrote a.txt\n"

    def test_print_table(self):
        """Test table rendering includes headers and cells."""
        self.adapter.print_table(["Setting", "Value"], [["overwrite", "False"]], title="opts")
        rendered = self.output.getvalue()
        assert "Setting" in rendered
        assert "overwrite" in rendered
        assert "False" in rendered
