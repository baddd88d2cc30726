"""Runs timed warmup and measured upload iterations."""
import logging
import time
from typing import Callable, List, Optional

from .exceptions import BenchmarkError, SizeMismatchError
from .models import (
    BenchmarkConfig, BenchmarkOutcome, BenchmarkState, RunSample, StepResult,
)
from .statistics_aggregator import StatisticsAggregator
from .storage_adapter import StorageClientAdapter


# Configure logging
logger = logging.getLogger(__name__)


class TimedRunExecutor:
    """
    Drives ``warmup_runs + total_runs`` strictly sequential uploads.

    Every step of an iteration returns a ``StepResult``; the executor decides
    from the error kind whether to abort (fatal errors) or to log and continue
    (failed cleanup). Warmup iterations are reported through ``progress`` but
    never reach the aggregator.
    """

    def __init__(self, config: BenchmarkConfig, adapter: StorageClientAdapter,
                 aggregator: Optional[StatisticsAggregator] = None,
                 progress: Optional[Callable[[RunSample], None]] = None,
                 clock: Callable[[], int] = time.perf_counter_ns):
        self.config = config
        self.adapter = adapter
        self.aggregator = aggregator if aggregator is not None else StatisticsAggregator()
        self.progress = progress
        self.clock = clock
        self.state = BenchmarkState.CONFIGURED

    def _transition(self, state: BenchmarkState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def _upload(self, destination: str) -> StepResult[int]:
        try:
            if self.config.source_path is not None:
                size = self.adapter.upload_from_local_file(self.config.source_path, destination)
            else:
                size = self.adapter.upload_bytes(self.config.payload_size_bytes, destination)
        except BenchmarkError as e:
            return StepResult(error=e)
        return StepResult(value=size)

    def _verify(self, destination: str, written: Optional[int]) -> StepResult[int]:
        if written != self.config.payload_size_bytes:
            return StepResult(error=SizeMismatchError(
                destination, self.config.payload_size_bytes, written if written is not None else -1
            ))
        return StepResult(value=written)

    def _cleanup(self, destination: str) -> StepResult[None]:
        try:
            self.adapter.delete_object(destination)
        except BenchmarkError as e:
            return StepResult(error=e)
        return StepResult()

    def _abort(self, error: BenchmarkError, samples: List[RunSample]) -> BenchmarkOutcome:
        logger.error(f"Benchmark aborted: {error}")
        self._transition(BenchmarkState.ABORTED)
        return BenchmarkOutcome(state=BenchmarkState.ABORTED, samples=samples, error=error)

    def run(self) -> BenchmarkOutcome:
        """
        Execute every iteration in order.

        Returns:
            BenchmarkOutcome; ``COMPLETED`` with a snapshot of the measured
            durations, or ``ABORTED`` with the fatal error and the samples
            recorded before it.
        """
        config = self.config
        samples: List[RunSample] = []

        for i in range(config.iterations):
            is_warmup = i < config.warmup_runs
            destination = config.destination_for(i)

            self._transition(BenchmarkState.UPLOADING)
            start = self.clock()
            upload = self._upload(destination)
            end = self.clock()
            if not upload.ok:
                return self._abort(upload.error, samples)
            duration_millis = (end - start) // 1_000_000

            if config.verify_size:
                self._transition(BenchmarkState.VERIFYING)
                verified = self._verify(destination, upload.value)
                if not verified.ok:
                    return self._abort(verified.error, samples)

            if config.delete_after_run:
                self._transition(BenchmarkState.CLEANING_UP)
                cleanup = self._cleanup(destination)
                if not cleanup.ok:
                    if cleanup.error.fatal:
                        return self._abort(cleanup.error, samples)
                    logger.warning(f"Cleanup of {destination} failed, continuing: {cleanup.error}")

            run_index = i + 1 if is_warmup else i - config.warmup_runs + 1
            sample = RunSample(
                run_index=run_index,
                duration_millis=duration_millis,
                is_warmup=is_warmup,
                destination=destination,
            )
            if self.progress is not None:
                self.progress(sample)
            if not is_warmup:
                self.aggregator.add_sample(sample.duration_millis)
                samples.append(sample)
            self._transition(BenchmarkState.RECORDED)

        self._transition(BenchmarkState.COMPLETED)
        return BenchmarkOutcome(
            state=BenchmarkState.COMPLETED,
            samples=samples,
            snapshot=self.aggregator.snapshot(),
        )
