"""
Tests for ComparisonService.

Tests ordering, tie-break, seeded reproducibility and rank resolution.
"""

import pytest

from horse_compare.features.horses import (
    ComparisonService,
    NotFoundError,
    RaceResultsLoader,
    RecordStore,
    SpeedEstimator,
)


# Ranks: 1 → horse 10 (fast), 2 → horse 20 (slow), 3 → horse 30 (fast twin),
#        4 → horse 40 (mixed)
RACES_CSV = """horseId,entryFee,finishTime
20,200,20.0
10,100,10.0
30,300,10.0
40,400,12.0
40,400,18.0
40,400,15.0
"""


@pytest.fixture
def store():
    return RaceResultsLoader().load_text(RACES_CSV)


@pytest.fixture
def store_with_empty():
    """Rank 2 is a horse without races."""
    store = RecordStore()
    store.find_or_create(10, 100.0)
    store.append_finish_time(10, 10.0)
    store.find_or_create(50, 0.0)
    store.finalize()
    return store


@pytest.fixture
def service(store):
    return ComparisonService(store)


class TestOrdering:
    """The horse with the greater mean speed is reported faster."""

    def test_first_faster(self, service):
        result = service.compare(1, 2, sample_count=100, seed=1)

        assert result.faster_id == 1
        assert result.slower_id == 2
        assert result.faster_speed == 100.0
        assert result.slower_speed == 50.0

    def test_second_faster(self, service):
        result = service.compare(2, 1, sample_count=100, seed=1)

        assert result.faster_id == 1
        assert result.slower_id == 2
        assert result.faster_speed == 100.0
        assert result.slower_speed == 50.0

    def test_faster_speed_never_below_slower(self, service):
        for seed in range(10):
            result = service.compare(4, 2, sample_count=50, seed=seed)
            assert result.faster_speed >= result.slower_speed

    def test_no_races_is_zero_speed(self, store_with_empty):
        service = ComparisonService(store_with_empty)
        result = service.compare(2, 1, sample_count=10)

        assert result.faster_id == 1
        assert result.slower_id == 2
        assert result.slower_speed == 0.0

    def test_speed_constant_applied(self, store):
        service = ComparisonService(store, SpeedEstimator(speed_constant=500.0))
        result = service.compare(1, 2, sample_count=10, seed=3)
        assert result.faster_speed == 50.0
        assert result.slower_speed == 25.0


class TestTieBreak:
    """Exactly equal estimates report the first-named horse as faster."""

    def test_equal_speeds_first_wins(self, service):
        result = service.compare(1, 3, sample_count=1, seed=9)

        assert result.faster_speed == result.slower_speed == 100.0
        assert result.faster_id == 1
        assert result.slower_id == 3

    def test_equal_speeds_swapped_order(self, service):
        result = service.compare(3, 1, sample_count=1000)

        assert result.faster_id == 3
        assert result.slower_id == 1

    def test_same_horse_twice(self, service):
        result = service.compare(2, 2, sample_count=10)
        assert result.faster_id == result.slower_id == 2

    def test_both_without_races(self, store_with_empty):
        service = ComparisonService(store_with_empty)
        result = service.compare(2, 2, sample_count=10)

        assert result.faster_speed == result.slower_speed == 0.0
        assert result.faster_id == 2


class TestReproducibility:
    """Seeded comparisons are deterministic."""

    def test_same_seed_same_result(self, service):
        first = service.compare(4, 1, sample_count=1000, seed=123)
        second = service.compare(4, 1, sample_count=1000, seed=123)

        assert first.faster_id == second.faster_id
        assert first.slower_id == second.slower_id
        assert first.faster_speed == pytest.approx(second.faster_speed)
        assert first.slower_speed == pytest.approx(second.slower_speed)

    def test_fresh_service_same_result(self, store):
        first = ComparisonService(store).compare(4, 2, sample_count=500, seed=7)
        second = ComparisonService(store).compare(4, 2, sample_count=500, seed=7)
        assert first == second

    def test_mixed_horse_within_range(self, service):
        result = service.compare(4, 2, sample_count=1000, seed=1)
        assert result.faster_id == 4
        assert 1000 / 18 <= result.faster_speed <= 1000 / 12


class TestRankResolution:
    """Ranks are 1-based positions in horse-id order."""

    @pytest.mark.parametrize("rank1, rank2", [(1, 6), (6, 1), (0, 1), (1, -3)])
    def test_out_of_range(self, service, rank1, rank2):
        with pytest.raises(NotFoundError):
            service.compare(rank1, rank2, sample_count=10)

    def test_summary_uses_rank(self, service):
        summary = service.summary(4)

        assert summary.entity_id == 40
        assert summary.races == 3
        assert (summary.fastest_rank, summary.fastest_time) == (1, 12.0)
        assert (summary.slowest_rank, summary.slowest_time) == (3, 18.0)

    def test_summaries_in_rank_order(self, service):
        assert [s.entity_id for s in service.summaries()] == [10, 20, 30, 40]

    def test_summary_out_of_range(self, service):
        with pytest.raises(NotFoundError):
            service.summary(5)
