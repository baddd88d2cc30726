"""Command line entry points for the HDFS and Cloud Storage write benchmarks."""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from src.shared.config import Config
from src.shared.logging import LoggingManager

from .constants import BenchmarkConstants
from .exceptions import ConfigError
from .models import BenchmarkConfig, TransportMode
from .runner import BenchmarkRunner, gcs_adapter_factory, hdfs_adapter_factory


logger = logging.getLogger(__name__)

HDFS_USAGE = "Usage: hdfs-write-benchmark <localPath> <remotePath> <count> <changeFileName true|false>"
WRITE_USAGE = (
    "Usage: write-benchmark [--use-alternate-transport] [--runs N] [--warmup N] "
    "[--size BYTES] [--source FILE] gs://destination_bucket/path/filename"
)


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as ConfigError instead of exiting."""

    def error(self, message):
        raise ConfigError(message)


def load_settings() -> Config:
    """Read settings from the environment and config.json, reporting bad values as ConfigError."""
    try:
        return Config()
    except (ValidationError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def parse_bool(value: str) -> bool:
    """Only a case-insensitive ``true`` is true; anything else is false."""
    return value.strip().lower() == "true"


def parse_hdfs_args(argv: List[str]) -> argparse.Namespace:
    parser = UsageParser(prog="hdfs-write-benchmark", add_help=False)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("positional", nargs="*")
    args = parser.parse_args(argv)
    if len(args.positional) != 4:
        raise ConfigError(f"expected 4 arguments, got {len(args.positional)}")
    return args


def build_hdfs_config(args: argparse.Namespace) -> BenchmarkConfig:
    local_path, remote_path, count, change_name = args.positional
    try:
        total_runs = int(count)
    except ValueError as e:
        raise ConfigError(f"count must be an integer, got {count!r}") from e
    size = os.path.getsize(local_path) if os.path.isfile(local_path) else 0
    return BenchmarkConfig(
        payload_size_bytes=size,
        destination=remote_path,
        total_runs=total_runs,
        warmup_runs=0,
        rename_each_run=parse_bool(change_name),
        source_path=local_path,
        delete_after_run=True,
    )


def parse_write_args(argv: List[str]) -> argparse.Namespace:
    parser = UsageParser(prog="write-benchmark", add_help=False)
    parser.add_argument("--use-alternate-transport", "--useAlternateTransport",
                        dest="alternate_transport", action="store_true",
                        help="Use resumable chunked uploads instead of the default upload API")
    parser.add_argument("-n", "--runs", type=int, default=BenchmarkConstants.DEFAULT_RUNS,
                        help="Number of times to do the upload (default: 10)")
    parser.add_argument("--warmup", type=int, default=BenchmarkConstants.DEFAULT_WARMUP_RUNS,
                        help="Number of warmup uploads left out of the statistics (default: 1)")
    parser.add_argument("--size", type=int, default=BenchmarkConstants.DEFAULT_PAYLOAD_SIZE,
                        help="Size of the random payload in bytes")
    parser.add_argument("--source", default=None,
                        help="Upload this local file instead of a random payload")
    parser.add_argument("--rename-each-run", action="store_true",
                        help="Append -N to the destination of the N-th upload")
    parser.add_argument("--output-csv", default=None,
                        help="Write the measured samples to this CSV file")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("positional", nargs="*")
    args = parser.parse_args(argv)
    if len(args.positional) != 1:
        raise ConfigError(f"expected 1 destination, got {len(args.positional)}")
    return args


def build_write_config(args: argparse.Namespace) -> BenchmarkConfig:
    destination = args.positional[0]
    if not destination.startswith(BenchmarkConstants.GCS_URI_PREFIX):
        raise ConfigError(f"destination must be a gs:// URI, got {destination!r}")
    size = args.size
    if args.source is not None and os.path.isfile(args.source):
        size = os.path.getsize(args.source)
    return BenchmarkConfig(
        payload_size_bytes=size,
        destination=destination,
        total_runs=args.runs,
        warmup_runs=args.warmup,
        rename_each_run=args.rename_each_run,
        transport_mode=TransportMode.RESUMABLE if args.alternate_transport else TransportMode.SIMPLE,
        source_path=args.source,
        verify_size=True,
    )


def _run(argv: Optional[List[str]], usage: str, parse, build, factory) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = load_settings()
        args = parse(argv)
        LoggingManager.setup_logging(settings, args.log_level)
        config = build(args)
        logger.debug(f"Benchmark configuration: {config}")
        runner = BenchmarkRunner(config, factory(settings),
                                 output_csv=getattr(args, "output_csv", None))
        outcome = runner.run()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(usage, file=sys.stderr)
        return 1

    if not outcome.succeeded:
        print(f"Benchmark aborted: {outcome.error}", file=sys.stderr)
        return 1
    return 0


def hdfs_main(argv: Optional[List[str]] = None) -> int:
    """``hdfs-write-benchmark``: upload a local file N times, deleting it after each run."""
    return _run(argv, HDFS_USAGE, parse_hdfs_args, build_hdfs_config, hdfs_adapter_factory)


def write_main(argv: Optional[List[str]] = None) -> int:
    """``write-benchmark``: upload a random payload to Cloud Storage and verify its size."""
    return _run(argv, WRITE_USAGE, parse_write_args, build_write_config, gcs_adapter_factory)


def hdfs_entry() -> None:
    sys.exit(hdfs_main())


def write_entry() -> None:
    sys.exit(write_main())
