"""Tests for finpro.core.exceptions."""

import pytest

from finpro.core.exceptions import (
    ConfigurationError,
    DataProcessingError,
    FileIOError,
    FinproError,
    SnapshotError,
)


def test_hierarchy():
    """All exceptions should inherit from FinproError."""
    for exc_cls in [ConfigurationError, DataProcessingError, FileIOError, SnapshotError]:
        assert issubclass(exc_cls, FinproError)


def test_snapshot_error_is_data_processing_error():
    assert issubclass(SnapshotError, DataProcessingError)


def test_exception_message():
    err = SnapshotError("Snapshot payload has no category summary")
    assert "summary" in str(err)


def test_catch_base():
    with pytest.raises(FinproError):
        raise FileIOError("disk full")
