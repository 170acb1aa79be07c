"""
Exception types raised by write-bench.
"""


class WriteBenchError(Exception):
    """Base class for write-bench errors."""


class ConfigError(WriteBenchError):
    """Invalid benchmark configuration. Fatal to the whole run."""

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class BlockWriteError(WriteBenchError):
    """A chunk write failed part way through a job."""

    def __init__(self, path, bytes_written, cause):
        self.path = path
        self.bytes_written = bytes_written
        self.cause = cause
        super().__init__(f"write to {path} failed after {bytes_written} bytes: {cause}")
