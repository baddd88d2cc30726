"""Unit tests for benchmark data models."""

import dataclasses

import pytest

from src.storage_bench.exceptions import ConfigError
from src.storage_bench.models import BenchmarkConfig, StepResult
from tests.test_const import TEST_DESTINATION, TEST_PAYLOAD_SIZE


def make_config(**overrides):
    values = dict(payload_size_bytes=TEST_PAYLOAD_SIZE, destination=TEST_DESTINATION)
    values.update(overrides)
    return BenchmarkConfig(**values)


class TestBenchmarkConfig:
    """Test configuration validation and destination naming."""

    def test_valid_config(self):
        make_config().validate()

    def test_zero_runs_is_legal(self):
        make_config(total_runs=0).validate()

    @pytest.mark.parametrize("overrides", [
        {"total_runs": -1},
        {"warmup_runs": -1},
        {"destination": ""},
        {"payload_size_bytes": 0},
    ])
    def test_invalid_config(self, overrides):
        with pytest.raises(ConfigError):
            make_config(**overrides).validate()

    def test_missing_source_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            make_config(source_path=str(tmp_path / "missing.bin")).validate()

    def test_source_file_skips_size_check(self, tmp_path):
        source = tmp_path / "empty.bin"
        source.write_bytes(b"")

        make_config(payload_size_bytes=0, source_path=str(source)).validate()

    def test_config_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            make_config().total_runs = 5

    def test_destination_for(self):
        assert make_config().destination_for(4) == TEST_DESTINATION
        assert make_config(rename_each_run=True).destination_for(0) == f"{TEST_DESTINATION}-1"

    def test_iterations(self):
        assert make_config(total_runs=3, warmup_runs=2).iterations == 5


class TestStepResult:

    def test_ok(self):
        assert StepResult(value=1).ok
        assert not StepResult(error=ConfigError("bad")).ok
