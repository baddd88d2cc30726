"""Seeded pseudo-random payload used for synthetic uploads."""
import logging
from typing import Iterator

import numpy as np


# Configure logging
logger = logging.getLogger(__name__)


class RandomPayloadSource:
    """Immutable buffer of seeded random bytes, shared read-only by every upload."""

    def __init__(self, data: bytes):
        self._data = data
        self._view = memoryview(data)

    @classmethod
    def generate(cls, seed: int, size: int) -> "RandomPayloadSource":
        """
        Fill a buffer of ``size`` bytes from a generator seeded with ``seed``.

        Args:
            seed: Seed for numpy's default bit generator.
            size: Buffer length in bytes.

        Returns:
            RandomPayloadSource wrapping the generated bytes.
        """
        if size <= 0:
            raise ValueError(f"Payload buffer size must be > 0, got {size}")
        rng = np.random.default_rng(seed)
        logger.debug(f"Generating {size} byte payload buffer with seed {seed}")
        return cls(rng.bytes(size))

    @property
    def size(self) -> int:
        return len(self._data)

    def read(self, offset: int, length: int) -> memoryview:
        """Return a read-only slice; the range must lie inside the buffer."""
        if offset < 0 or length < 0 or offset + length > self.size:
            raise ValueError(
                f"Range [{offset}, {offset + length}) outside payload buffer of {self.size} bytes"
            )
        return self._view[offset:offset + length]

    def iter_chunks(self, total_bytes: int) -> Iterator[memoryview]:
        """Yield slices from the start of the buffer until ``total_bytes`` are produced."""
        remaining = total_bytes
        while remaining > 0:
            length = min(remaining, self.size)
            yield self.read(0, length)
            remaining -= length
