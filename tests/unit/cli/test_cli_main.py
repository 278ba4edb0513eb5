"""Unit tests for the file-utilities CLI."""

import stat

import pytest
from click.testing import CliRunner

from file_utilities.cli.main import main


class TestFileUtilitiesCLI:
    """Test the click command group end to end on a temporary directory."""

    @pytest.fixture(autouse=True)
    def setup_runner(self, temp_dir, monkeypatch):
        """Set up the runner and isolate settings from the environment."""
        for name in ("BASE_PATH", "CREATE_DIRECTORIES", "OVERWRITE", "LOG_LEVEL"):
            monkeypatch.delenv(f"FILE_UTILITIES_{name}", raising=False)
        monkeypatch.chdir(temp_dir)
        self.runner = CliRunner()
        self.base = temp_dir

    def invoke(self, *args):
        return self.runner.invoke(main, ["--base-path", str(self.base), *args])

    def test_help(self):
        """Test group help text."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "relative to a base directory" in result.output

    def test_write_and_read(self):
        """Test write then read."""
        # Act
        write_result = self.invoke("write", "notes/hello.txt", "Hello from the CLI")
        read_result = self.invoke("read", "notes/hello.txt")

        # Assert
        assert write_result.exit_code == 0
        assert "Wrote notes/hello.txt" in write_result.output
        assert read_result.exit_code == 0
        assert "Hello from the CLI" in read_result.output
        assert (self.base / "notes" / "hello.txt").read_text() == "Hello from the CLI"

    def test_write_existing_fails(self):
        """Test overwrite protection exits with status 1."""
        (self.base / "a.txt").write_text("old")

        result = self.invoke("write", "a.txt", "new")

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (self.base / "a.txt").read_text() == "old"

    def test_overwrite_flag(self):
        """Test --overwrite allows replacing files."""
        (self.base / "a.txt").write_text("old")

        result = self.runner.invoke(
            main, ["--base-path", str(self.base), "--overwrite", "write", "a.txt", "new"]
        )

        assert result.exit_code == 0
        assert (self.base / "a.txt").read_text() == "new"

    def test_overwrite_from_environment(self, monkeypatch):
        """Test settings come from the environment when flags are omitted."""
        monkeypatch.setenv("FILE_UTILITIES_OVERWRITE", "true")
        monkeypatch.setenv("FILE_UTILITIES_BASE_PATH", str(self.base))
        (self.base / "a.txt").write_text("old")

        result = self.runner.invoke(main, ["write", "a.txt", "new"])

        assert result.exit_code == 0
        assert (self.base / "a.txt").read_text() == "new"

    def test_no_create_directories(self):
        """Test --no-create-directories makes nested writes fail."""
        result = self.runner.invoke(
            main,
            [
                "--base-path",
                str(self.base),
                "--no-create-directories",
                "write",
                "nested/a.txt",
                "x",
            ],
        )

        assert result.exit_code == 1
        assert "Failed to write file" in result.output

    def test_read_missing(self):
        """Test reading a missing file."""
        result = self.invoke("read", "missing.txt")

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_exists_and_size(self):
        """Test exists and size output."""
        (self.base / "a.txt").write_text("12345")

        assert self.invoke("exists", "a.txt").output.strip() == "true"
        assert self.invoke("exists", "b.txt").output.strip() == "false"
        assert self.invoke("size", "a.txt").output.strip() == "5"

    def test_delete_twice(self):
        """Test delete is idempotent from the CLI."""
        (self.base / "a.txt").write_text("x")

        assert self.invoke("delete", "a.txt").exit_code == 0
        assert self.invoke("delete", "a.txt").exit_code == 0
        assert not (self.base / "a.txt").exists()

    def test_copy_move_rename(self):
        """Test copy, move and rename commands."""
        (self.base / "a.txt").write_text("content")

        assert self.invoke("copy", "a.txt", "backup/a.txt").exit_code == 0
        assert self.invoke("move", "a.txt", "archive/b.txt").exit_code == 0
        assert self.invoke("rename", "archive/b.txt", "c.txt").exit_code == 0

        assert (self.base / "backup" / "a.txt").read_text() == "content"
        assert not (self.base / "a.txt").exists()
        assert (self.base / "archive" / "c.txt").read_text() == "content"

    def test_mkdir_with_mode(self):
        """Test mkdir with an octal mode."""
        result = self.invoke("mkdir", "shared", "--mode", "770")

        assert result.exit_code == 0
        assert stat.S_IMODE((self.base / "shared").stat().st_mode) == 0o770

    def test_mkdir_invalid_mode(self):
        """Test a non-octal mode is rejected."""
        result = self.invoke("mkdir", "shared", "--mode", "999")

        assert result.exit_code == 2
        assert "not an octal mode" in result.output

    def test_join(self):
        """Test the join command."""
        result = self.runner.invoke(main, ["join", "a", "b", "c.txt"])

        assert result.exit_code == 0
        assert result.output.strip().replace("\\", "/") == "a/b/c.txt"

    def test_info(self):
        """Test info lists the base path and options."""
        result = self.invoke("info")

        assert result.exit_code == 0
        assert "create_directories" in result.output
        assert "overwrite" in result.output
