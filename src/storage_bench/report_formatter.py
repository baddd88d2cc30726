"""Renders progress lines and summaries as plain text."""
from typing import Optional

from .models import BenchmarkConfig, RunSample, StatisticsSnapshot
from .statistics_aggregator import throughput


class ReportFormatter:
    """Formats benchmark output. Pure string rendering, no side effects."""

    def __init__(self, payload_size_bytes: int):
        self.payload_size_bytes = payload_size_bytes

    def format_header(self, config: BenchmarkConfig, api_name: str) -> str:
        source = config.source_path or "<random payload>"
        return (
            f"Writing object {source} ({self.payload_size_bytes} bytes) to {config.destination} "
            f"with {api_name} API, {config.total_runs} times."
        )

    def format_progress(self, sample: RunSample) -> str:
        label = "Warmup Upload" if sample.is_warmup else "Upload"
        rate = throughput(self.payload_size_bytes, sample.duration_millis)
        return f"{label} {sample.run_index}...Done. Took {sample.duration_millis} milliseconds ({rate:.1f} Mbps)."

    def _format_stat(self, name: str, value: float) -> str:
        rate = throughput(self.payload_size_bytes, value)
        return f"\t{name}: {value:.1f}ms ({rate:.1f} Mbps)"

    def format_summary(self, snapshot: Optional[StatisticsSnapshot]) -> str:
        if snapshot is None:
            return "\nResults:\n\tNo measured runs."
        lines = [
            "",
            "Results:",
            self._format_stat("Mean", snapshot.mean),
            self._format_stat("p50", snapshot.p50),
            self._format_stat("Min", snapshot.min),
            self._format_stat("Max", snapshot.max),
        ]
        return "\n".join(lines)
