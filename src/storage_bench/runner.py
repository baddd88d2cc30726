"""Benchmark runner to orchestrate one benchmark from client setup to report."""
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from src.shared.config import Config

from .exceptions import ConfigError
from .gcs_adapter import GcsStorageAdapter
from .hadoop_site import HadoopSiteConfig
from .hdfs_adapter import HdfsStorageAdapter
from .models import BenchmarkConfig, BenchmarkOutcome, RunSample
from .payload_source import RandomPayloadSource
from .report_formatter import ReportFormatter
from .request_session_manager import RequestSessionManager
from .result_exporter import ResultExporter
from .run_executor import TimedRunExecutor
from .statistics_aggregator import StatisticsAggregator
from .storage_adapter import StorageClientAdapter


# Configure logging
logger = logging.getLogger(__name__)

AdapterFactory = Callable[[BenchmarkConfig], StorageClientAdapter]


def build_payload(config: BenchmarkConfig, settings: Config) -> Optional[RandomPayloadSource]:
    """Generate the random payload once, before any upload, for synthetic runs."""
    if config.source_path is not None:
        return None
    return RandomPayloadSource.generate(settings.payload_seed, settings.payload_buffer_size)


def hdfs_adapter_factory(settings: Config) -> AdapterFactory:
    """Return a factory creating WebHDFS adapters from settings or Hadoop site files."""
    def create(config: BenchmarkConfig) -> StorageClientAdapter:
        site = HadoopSiteConfig.load(settings.hadoop_conf_dir)
        url = settings.hdfs_url or site.webhdfs_url()
        if not url:
            raise ConfigError(
                f"No WebHDFS endpoint configured; set STORAGE_BENCH_HDFS_URL "
                f"or dfs.namenode.http-address in {settings.hadoop_conf_dir}"
            )
        session = RequestSessionManager.create_session(settings.http_max_retries)
        return HdfsStorageAdapter(
            url,
            payload=build_payload(config, settings),
            user=settings.hdfs_user or site.user(),
            session=session,
        )
    return create


def gcs_adapter_factory(settings: Config) -> AdapterFactory:
    """Return a factory creating Cloud Storage adapters."""
    def create(config: BenchmarkConfig) -> StorageClientAdapter:
        return GcsStorageAdapter(
            config.transport_mode,
            payload=build_payload(config, settings),
            project=settings.gcs_project,
            chunk_size=settings.resumable_chunk_size,
        )
    return create


class BenchmarkRunner:
    """Acquires the storage client, runs the executor and prints the report."""

    def __init__(self, config: BenchmarkConfig, adapter_factory: AdapterFactory,
                 out: Optional[TextIO] = None, output_csv: Optional[Union[Path, str]] = None):
        self.config = config
        self.adapter_factory = adapter_factory
        self.out = out or sys.stdout
        self.output_csv = output_csv
        self.formatter = ReportFormatter(config.payload_size_bytes)

    def _emit(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def _on_sample(self, sample: RunSample) -> None:
        self._emit(self.formatter.format_progress(sample))

    def run(self) -> BenchmarkOutcome:
        """
        Run the complete benchmark.

        Returns:
            The executor's outcome. The summary is printed only when every
            iteration completed.

        Raises:
            ConfigError: If the configuration is invalid; nothing is uploaded.
        """
        self.config.validate()
        aggregator = StatisticsAggregator()

        with self.adapter_factory(self.config) as adapter:
            self._emit(self.formatter.format_header(self.config, adapter.api_name))
            executor = TimedRunExecutor(self.config, adapter, aggregator, progress=self._on_sample)
            outcome = executor.run()

        if not outcome.succeeded:
            return outcome

        self._emit(self.formatter.format_summary(outcome.snapshot))
        if self.output_csv:
            ResultExporter.save_samples(outcome.samples, self.config.payload_size_bytes, self.output_csv)
        logger.info("Benchmark completed successfully!")
        return outcome
