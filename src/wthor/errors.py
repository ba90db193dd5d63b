"""Exception hierarchy shared by the codec and the downloader."""

from __future__ import annotations


class WthorError(Exception):
    """Base class for every error raised by this package."""


class FormatError(WthorError, ValueError):
    """Raised when a buffer is not a valid WTHOR file."""

    def __init__(self, message: str = "the input is invalid", *, reason: str = "invalid") -> None:
        super().__init__(message)
        self.reason = reason


class WriteError(WthorError):
    """Raised when a value cannot be written into the given destination."""


class BufferLengthError(WriteError, ValueError):
    """Raised when a buffer does not have the exact length an operation needs."""

    def __init__(self, expected: int, actual: int, *, at_least: bool = False) -> None:
        relation = "at least " if at_least else ""
        super().__init__(f"expected {relation}{expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class CountMismatchError(WriteError, ValueError):
    """Raised when a declared record count disagrees with the records supplied."""

    def __init__(self, declared: int, actual: int) -> None:
        super().__init__(f"declared {declared} records but {actual} were supplied")
        self.declared = declared
        self.actual = actual


class DownloadError(WthorError):
    """Raised when a database file cannot be retrieved."""


class StatusError(DownloadError):
    """The server answered with a non-success status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"GET {url} returned HTTP {status_code}")
        self.url = url
        self.status_code = status_code


class TransportError(DownloadError):
    """The request failed before a response was received."""


__all__ = [
    "BufferLengthError",
    "CountMismatchError",
    "DownloadError",
    "FormatError",
    "StatusError",
    "TransportError",
    "WriteError",
    "WthorError",
]
