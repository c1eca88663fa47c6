"""Errors raised while reading the switch log."""


class LogSourceError(Exception):
    """Base class for failures reading a log file."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class LogUnavailable(LogSourceError):
    """Raised when the log file does not exist when a scan starts."""

    def __init__(self, path: str):
        super().__init__(path, "Log file not found")


class ReadFailure(LogSourceError):
    """Raised when reading fails part-way through a scan.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, path: str, reason: str = "read failed"):
        super().__init__(path, f"Error reading log ({reason})")
        self.reason = reason
