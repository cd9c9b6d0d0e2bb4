"""
Tests for SpeedEstimator.
"""

import random

import pytest

from horse_compare.features.horses import DivisionError, RaceRecord, SpeedEstimator


@pytest.fixture
def estimator():
    return SpeedEstimator()


@pytest.fixture
def record():
    """Pre-sorted record as produced by RecordStore.finalize."""
    return RaceRecord(entity_id=1, entry_cost=100.0, finish_times=[10.0, 20.0, 30.0])


@pytest.fixture
def empty_record():
    return RaceRecord(entity_id=2, entry_cost=0.0)


class TestToSpeeds:
    """Tests for finish time → speed conversion."""

    def test_default_constant(self, estimator):
        speeds = estimator.to_speeds([10.0, 20.0, 30.0])
        assert speeds == pytest.approx([100.0, 50.0, 33.333], rel=1e-4)

    def test_custom_constant(self):
        assert SpeedEstimator(speed_constant=500.0).to_speeds([20.0]) == [25.0]

    def test_empty(self, estimator):
        assert estimator.to_speeds([]) == []

    def test_zero_time_is_integrity_fault(self, estimator):
        """Zero finish time must fail, never be coerced."""
        with pytest.raises(DivisionError):
            estimator.to_speeds([10.0, 0.0])


class TestFastestSlowest:
    """Tests for fastest/slowest lookups."""

    def test_fastest_is_first_of_sorted(self, estimator, record):
        assert estimator.fastest(record) == (1, 10.0)

    def test_slowest_is_last_of_sorted(self, estimator, record):
        assert estimator.slowest(record) == (3, 30.0)

    def test_empty_record(self, estimator, empty_record):
        assert estimator.fastest(empty_record) == (0, 0.0)
        assert estimator.slowest(empty_record) == (0, 0.0)

    def test_single_race(self, estimator):
        record = RaceRecord(entity_id=3, entry_cost=0.0, finish_times=[42.0])
        assert estimator.fastest(record) == (1, 42.0)
        assert estimator.slowest(record) == (1, 42.0)

    def test_position_within_stored_order(self, estimator):
        """Positions refer to the stored sequence as-is."""
        record = RaceRecord(entity_id=4, entry_cost=0.0, finish_times=[20.0, 10.0, 30.0])
        assert estimator.fastest(record) == (2, 10.0)
        assert estimator.slowest(record) == (3, 30.0)

    def test_equal_times_first_occurrence_wins(self, estimator):
        record = RaceRecord(entity_id=5, entry_cost=0.0, finish_times=[10.0, 10.0, 30.0, 30.0])
        assert estimator.fastest(record) == (1, 10.0)
        assert estimator.slowest(record) == (3, 30.0)


class TestMeanSpeed:
    """Tests for Monte-Carlo mean speed."""

    def test_single_time(self, estimator):
        record = RaceRecord(entity_id=1, entry_cost=0.0, finish_times=[20.0])
        assert estimator.mean_speed(record, 1000, random.Random(1)) == 50.0

    def test_empty_record_is_zero(self, estimator, empty_record):
        assert estimator.mean_speed(empty_record, 1000, random.Random(1)) == 0.0

    def test_within_speed_range(self, estimator, record):
        speed = estimator.mean_speed(record, 1000, random.Random(1))
        assert 1000 / 30 <= speed <= 100.0

    def test_weighted_toward_fast_races(self, estimator, record):
        """Value weighting pulls the estimate above the plain average speed."""
        speed = estimator.mean_speed(record, 20000, random.Random(5))
        # E = sum(s^2) / sum(s) for speeds [100, 50, 33.3]
        speeds = [100.0, 50.0, 1000 / 30]
        expected = sum(s * s for s in speeds) / sum(speeds)
        assert speed == pytest.approx(expected, rel=0.02)
        assert speed > estimator.average_speed(record)

    def test_zero_time_propagates(self, estimator):
        record = RaceRecord(entity_id=1, entry_cost=0.0, finish_times=[0.0, 10.0])
        with pytest.raises(DivisionError):
            estimator.mean_speed(record, 10, random.Random(1))


class TestAverageSpeed:
    """Tests for plain average speed."""

    def test_average(self, estimator):
        record = RaceRecord(entity_id=1, entry_cost=0.0, finish_times=[10.0, 20.0])
        assert estimator.average_speed(record) == pytest.approx(75.0)

    def test_empty(self, estimator, empty_record):
        assert estimator.average_speed(empty_record) == 0.0
