"""Storage write benchmark package initialization."""
from .models import (
    BenchmarkConfig, BenchmarkOutcome, BenchmarkState, RunSample, StatisticsSnapshot,
    StepResult, TransportMode,
)
from .constants import BenchmarkConstants
from .exceptions import BenchmarkError, ConfigError, UploadError, SizeMismatchError, DeleteError
from .payload_source import RandomPayloadSource
from .storage_adapter import StorageClientAdapter
from .hdfs_adapter import HdfsStorageAdapter
from .gcs_adapter import GcsStorageAdapter
from .statistics_aggregator import StatisticsAggregator, throughput
from .report_formatter import ReportFormatter
from .run_executor import TimedRunExecutor
from .result_exporter import ResultExporter
from .runner import BenchmarkRunner

__all__ = [
    'BenchmarkConfig',
    'BenchmarkOutcome',
    'BenchmarkState',
    'RunSample',
    'StatisticsSnapshot',
    'StepResult',
    'TransportMode',
    'BenchmarkConstants',
    'BenchmarkError',
    'ConfigError',
    'UploadError',
    'SizeMismatchError',
    'DeleteError',
    'RandomPayloadSource',
    'StorageClientAdapter',
    'HdfsStorageAdapter',
    'GcsStorageAdapter',
    'StatisticsAggregator',
    'throughput',
    'ReportFormatter',
    'TimedRunExecutor',
    'ResultExporter',
    'BenchmarkRunner'
]
