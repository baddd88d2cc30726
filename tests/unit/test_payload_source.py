"""Unit tests for the random payload source."""

import pytest

from src.storage_bench.payload_source import RandomPayloadSource
from tests.test_const import TEST_BUFFER_SIZE, TEST_SEED


class TestRandomPayloadSource:
    """Test payload generation and slicing."""

    def test_same_seed_is_deterministic(self):
        first = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)
        second = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)

        assert bytes(first.read(0, TEST_BUFFER_SIZE)) == bytes(second.read(0, TEST_BUFFER_SIZE))

    def test_different_seeds_differ(self):
        first = RandomPayloadSource.generate(1, TEST_BUFFER_SIZE)
        second = RandomPayloadSource.generate(2, TEST_BUFFER_SIZE)

        assert bytes(first.read(0, TEST_BUFFER_SIZE)) != bytes(second.read(0, TEST_BUFFER_SIZE))

    def test_size(self):
        assert RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE).size == TEST_BUFFER_SIZE

    def test_read_returns_read_only_slice(self):
        payload = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)
        view = payload.read(100, 50)

        assert len(view) == 50
        assert view.readonly
        assert bytes(view) == bytes(payload.read(0, TEST_BUFFER_SIZE))[100:150]

    @pytest.mark.parametrize("offset,length", [(0, TEST_BUFFER_SIZE + 1), (4000, 200), (-1, 10), (0, -1)])
    def test_read_outside_buffer_is_rejected(self, offset, length):
        payload = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)

        with pytest.raises(ValueError):
            payload.read(offset, length)

    def test_iter_chunks_caps_each_write_at_buffer_size(self):
        payload = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)
        chunks = list(payload.iter_chunks(TEST_BUFFER_SIZE * 2 + 10))

        assert [len(c) for c in chunks] == [TEST_BUFFER_SIZE, TEST_BUFFER_SIZE, 10]

    def test_iter_chunks_zero_bytes(self):
        payload = RandomPayloadSource.generate(TEST_SEED, TEST_BUFFER_SIZE)

        assert list(payload.iter_chunks(0)) == []

    def test_invalid_buffer_size(self):
        with pytest.raises(ValueError):
            RandomPayloadSource.generate(TEST_SEED, 0)
