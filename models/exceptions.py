"""Exceptions raised by explorer queries.

Tree mutations never raise; only direct content lookups and file opens
do, and only when the explorer runs in strict mode.
"""


class ExplorerError(ValueError):
    """Base class for explorer query errors.

    Args:
        message: Human-readable error description.
        path: The path the failing operation was given.
    """

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class PathNotFoundError(ExplorerError):
    """Raised when a path does not resolve to any node."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}", path)


class NotAFileError(ExplorerError):
    """Raised when a file operation is given a directory path."""

    def __init__(self, message: str, path: str):
        super().__init__(message, path)

    @classmethod
    def for_contents(cls, path: str) -> "NotAFileError":
        """Build the error raised when reading contents of a directory."""
        return cls(f"Path points to a directory, not a file: {path}", path)

    @classmethod
    def for_open(cls, path: str) -> "NotAFileError":
        """Build the error raised when opening a directory."""
        return cls(f"Cannot open a directory: {path}", path)
