"""Custom exceptions for the storage write benchmark."""


class BenchmarkError(Exception):
    """Base class for benchmark failures.

    ``fatal`` errors abort the whole run; the others are logged and skipped.
    """
    fatal = True


class ConfigError(BenchmarkError):
    """Exception raised when command line arguments or settings are invalid."""
    pass


class UploadError(BenchmarkError):
    """Exception raised when the storage backend fails during a write."""
    pass


class SizeMismatchError(BenchmarkError):
    """Exception raised when the remote object size differs from the payload size."""

    def __init__(self, destination: str, expected: int, actual: int):
        super().__init__(
            f"Object {destination} has {actual} bytes, expected {expected}"
        )
        self.destination = destination
        self.expected = expected
        self.actual = actual


class DeleteError(BenchmarkError):
    """Exception raised when a remote object cannot be cleaned up."""
    fatal = False
