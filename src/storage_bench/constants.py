"""Constants for the storage write benchmark.

Tunables that can be overridden per process (payload seed and buffer size,
resumable chunk size, HTTP retries, Hadoop configuration directory) live in
``src.shared.config.Config``.
"""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    DEFAULT_RUNS = 10
    DEFAULT_WARMUP_RUNS = 1
    DEFAULT_PAYLOAD_SIZE = 134217728  # 128 MiB
    WEBHDFS_DEFAULT_PORT = 9870
    GCS_URI_PREFIX = "gs://"
