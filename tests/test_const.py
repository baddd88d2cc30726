"""Constants used across all test files."""

# Common test values
TEST_PAYLOAD_SIZE = 1000
TEST_DESTINATION = "gs://test-bucket/bench/object"
TEST_HDFS_DESTINATION = "/bench/object"
TEST_HDFS_URL = "http://namenode:9870"
TEST_HDFS_USER = "hdfs"
TEST_SEED = 42
TEST_BUFFER_SIZE = 4096

# Durations in milliseconds
SCENARIO_DURATIONS_MS = [10, 20, 30]
