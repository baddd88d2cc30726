"""Handles exporting benchmark samples to CSV."""
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .models import RunSample
from .statistics_aggregator import throughput


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to CSV."""

    COLUMNS = ["run_index", "destination", "duration_ms", "throughput_mbps"]

    @staticmethod
    def samples_to_frame(samples: List[RunSample], payload_size_bytes: int) -> pd.DataFrame:
        """
        Build one row per measured run.

        Args:
            samples: Measured samples in run order.
            payload_size_bytes: Payload size used for the throughput column.

        Returns:
            DataFrame with ``ResultExporter.COLUMNS``.
        """
        rows = [
            {
                "run_index": sample.run_index,
                "destination": sample.destination,
                "duration_ms": sample.duration_millis,
                "throughput_mbps": throughput(payload_size_bytes, sample.duration_millis),
            }
            for sample in samples
        ]
        return pd.DataFrame(rows, columns=ResultExporter.COLUMNS)

    @staticmethod
    def save_samples(samples: List[RunSample], payload_size_bytes: int,
                     output_path: Union[Path, str]) -> None:
        """Save measured samples to CSV."""
        if not samples:
            logger.warning("No measured samples available for saving")
            return
        df = ResultExporter.samples_to_frame(samples, payload_size_bytes)
        df.to_csv(output_path, index=False)
        logger.info(f"Samples saved to CSV: {output_path}")
