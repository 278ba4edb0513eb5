"""Domain-specific exceptions for file utility operations."""


class FileUtilityError(Exception):
    """Base exception for all file utility errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PathError(FileUtilityError):
    """Errors tied to a specific resolved path."""

    def __init__(self, message: str, path: str, operation: str | None = None):
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.details["path"] = path
        if operation:
            self.details["operation"] = operation


class NotFoundError(PathError):
    """Raised when a path that must exist is missing."""

    def __init__(self, path: str, operation: str | None = None, label: str = "File"):
        super().__init__(f"{label} not found: {path}", path, operation)


class AlreadyExistsError(PathError):
    """Raised when writing over an existing file while overwrite is disabled."""

    def __init__(self, path: str):
        super().__init__(
            f"File already exists and overwrite is disabled: {path}",
            path,
            operation="write",
        )


class PermissionDeniedError(PathError):
    """Raised when a file exists but cannot be read."""

    def __init__(self, path: str):
        super().__init__(f"File not readable: {path}", path, operation="read")


class FileIOError(PathError):
    """Any other OS-level failure: write, copy, delete, mkdir or stat."""

    pass
