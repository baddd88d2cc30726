"""Data models for the storage write benchmark."""
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from .exceptions import BenchmarkError, ConfigError


T = TypeVar("T")


class TransportMode(Enum):
    """Upload API used to reach the object store."""
    SIMPLE = "simple"
    RESUMABLE = "resumable"


class BenchmarkState(Enum):
    """Lifecycle of a benchmark run."""
    CONFIGURED = "configured"
    UPLOADING = "uploading"
    VERIFYING = "verifying"
    CLEANING_UP = "cleaning_up"
    RECORDED = "recorded"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for one benchmark run."""
    payload_size_bytes: int
    destination: str
    total_runs: int = 10
    warmup_runs: int = 0
    rename_each_run: bool = False
    transport_mode: TransportMode = TransportMode.SIMPLE
    source_path: Optional[str] = None
    verify_size: bool = False
    delete_after_run: bool = False

    @property
    def iterations(self) -> int:
        return self.warmup_runs + self.total_runs

    def destination_for(self, iteration: int) -> str:
        """Return the remote name used by the 0-based ``iteration``."""
        if self.rename_each_run:
            return f"{self.destination}-{iteration + 1}"
        return self.destination

    def validate(self) -> None:
        """
        Check the configuration before any upload is attempted.

        Raises:
            ConfigError: If a field is out of range or the source file is missing.
        """
        if not self.destination:
            raise ConfigError("Destination must not be empty")
        if self.total_runs < 0:
            raise ConfigError(f"Run count must be >= 0, got {self.total_runs}")
        if self.warmup_runs < 0:
            raise ConfigError(f"Warmup count must be >= 0, got {self.warmup_runs}")
        if self.source_path is not None:
            if not os.path.isfile(self.source_path):
                raise ConfigError(f"Local file {self.source_path} not found")
        elif self.payload_size_bytes <= 0:
            raise ConfigError(f"Payload size must be > 0, got {self.payload_size_bytes}")


@dataclass(frozen=True)
class RunSample:
    """Timing of a single upload iteration."""
    run_index: int
    duration_millis: int
    is_warmup: bool = False
    destination: str = ""


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Summary of the measured upload durations, in milliseconds."""
    mean: float
    p50: float
    min: float
    max: float
    count: int = 0


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Value or error produced by one step of an iteration."""
    value: Optional[T] = None
    error: Optional[BenchmarkError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BenchmarkOutcome:
    """Result of a complete or aborted benchmark run."""
    state: BenchmarkState
    samples: List[RunSample] = field(default_factory=list)
    snapshot: Optional[StatisticsSnapshot] = None
    error: Optional[BenchmarkError] = None

    @property
    def succeeded(self) -> bool:
        return self.state is BenchmarkState.COMPLETED

