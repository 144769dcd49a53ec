"""
finpro exception hierarchy.

All finpro exceptions inherit from FinproError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.

The analytics calculators themselves never raise: these errors come from the
layers around them (configuration, snapshot loading, file access).
"""


class FinproError(Exception):
    """Base exception class for all finpro errors."""


class ConfigurationError(FinproError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataProcessingError(FinproError):
    """Raised for data processing errors."""


class SnapshotError(DataProcessingError):
    """Raised when a holdings snapshot payload is malformed."""


class FileIOError(FinproError):
    """Raised for file I/O errors."""
