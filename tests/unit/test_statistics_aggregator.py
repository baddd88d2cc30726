"""Unit tests for the statistics aggregator."""

import math
import random

import pytest

from src.storage_bench.statistics_aggregator import StatisticsAggregator, throughput


def aggregator_with(values):
    aggregator = StatisticsAggregator()
    for value in values:
        aggregator.add_sample(value)
    return aggregator


class TestStatisticsAggregator:
    """Test aggregates over collected durations."""

    def test_basic_aggregates(self):
        aggregator = aggregator_with([30, 10, 20])

        assert aggregator.mean() == 20.0
        assert aggregator.percentile(50) == 20.0
        assert aggregator.min() == 10.0
        assert aggregator.max() == 30.0
        assert aggregator.count == 3

    def test_percentile_interpolates_between_samples(self):
        aggregator = aggregator_with([10, 20, 30, 40])

        assert aggregator.percentile(50) == 25.0
        assert aggregator.percentile(0) == 10.0
        assert aggregator.percentile(100) == 40.0

    def test_empty_aggregator_reports_nan(self):
        aggregator = StatisticsAggregator()

        assert math.isnan(aggregator.mean())
        assert math.isnan(aggregator.percentile(50))
        assert math.isnan(aggregator.min())
        assert math.isnan(aggregator.max())
        assert aggregator.snapshot() is None

    @pytest.mark.parametrize("p", [-1, 100.5])
    def test_percentile_out_of_range(self, p):
        with pytest.raises(ValueError):
            aggregator_with([1]).percentile(p)

    def test_insertion_order_does_not_matter(self):
        values = [5, 17, 3, 99, 42, 8]
        forward = aggregator_with(values).snapshot()
        backward = aggregator_with(reversed(values)).snapshot()

        assert forward == backward

    def test_ordering_invariants_hold(self):
        rng = random.Random(7)
        for _ in range(50):
            values = [rng.randint(0, 5000) for _ in range(rng.randint(1, 25))]
            snapshot = aggregator_with(values).snapshot()

            assert snapshot.min <= snapshot.p50 <= snapshot.max
            assert snapshot.min <= snapshot.mean <= snapshot.max

    def test_samples_returns_copy(self):
        aggregator = aggregator_with([1, 2])
        aggregator.samples.append(3)

        assert aggregator.count == 2


class TestThroughput:
    """Test the reported throughput formula."""

    def test_formula_is_bytes_over_millis_times_thousand(self):
        assert throughput(1000, 10) == 1000 / (10 * 1000.0)
        assert throughput(134217728, 1000) == pytest.approx(134.217728)

    def test_zero_duration_is_infinite(self):
        assert throughput(1000, 0) == math.inf

    def test_nan_duration_propagates(self):
        assert math.isnan(throughput(1000, math.nan))
