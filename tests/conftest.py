"""Shared test configuration and fixtures for all tests."""

import pytest
from unittest.mock import MagicMock

from src.storage_bench.exceptions import DeleteError, UploadError
from src.storage_bench.storage_adapter import StorageClientAdapter
from .test_const import TEST_PAYLOAD_SIZE


class FakeStorageAdapter(StorageClientAdapter):
    """In-memory adapter recording every call, with scripted failures."""

    api_name = "fake"

    def __init__(self, size=TEST_PAYLOAD_SIZE):
        self.size = size
        self.uploads = []
        self.deletes = []
        self.upload_errors = {}
        self.delete_errors = {}
        self.close_calls = 0

    def fail_upload(self, call_number, error):
        """Raise ``error`` on the 1-based ``call_number``-th upload."""
        self.upload_errors[call_number] = error
        return self

    def fail_delete(self, call_number, error):
        self.delete_errors[call_number] = error
        return self

    def _upload(self, destination):
        self.uploads.append(destination)
        error = self.upload_errors.get(len(self.uploads))
        if error is not None:
            raise error
        return self.size

    def upload_from_local_file(self, local_path, destination):
        return self._upload(destination)

    def upload_bytes(self, size_in_bytes, destination):
        return self._upload(destination)

    def delete_object(self, destination):
        self.deletes.append(destination)
        error = self.delete_errors.get(len(self.deletes))
        if error is not None:
            raise error

    def close(self):
        self.close_calls += 1


def make_clock(durations_ms, warmup_ms=()):
    """Build a nanosecond clock whose consecutive start/end pairs span the given durations."""
    ticks = []
    now = 0
    for duration in list(warmup_ms) + list(durations_ms):
        ticks.append(now)
        now += duration * 1_000_000
        ticks.append(now)
        now += 5 * 1_000_000
    return MagicMock(side_effect=ticks)


@pytest.fixture
def fake_adapter():
    """Fake storage adapter fixture."""
    return FakeStorageAdapter()


@pytest.fixture
def upload_error():
    return UploadError("connection reset")


@pytest.fixture
def delete_error():
    return DeleteError("permission denied")
