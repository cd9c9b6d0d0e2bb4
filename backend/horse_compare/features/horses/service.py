"""ComparisonService — compares two horses by estimated mean speed."""

from __future__ import annotations

import logging
import random

from horse_compare.shared.constants import DEFAULT_SAMPLE_COUNT

from .estimator import SpeedEstimator
from .models import ComparisonResult, HorseSummary
from .store import RecordStore

logger = logging.getLogger(__name__)


def _random_source(seed: int | None) -> random.Random:
    """Request-local generator; OS entropy when no seed is given."""
    return random.Random(seed)


class ComparisonService:
    """Orders two horses (addressed by rank) by Monte-Carlo mean speed."""

    def __init__(self, store: RecordStore, estimator: SpeedEstimator | None = None):
        self.store = store
        self.estimator = estimator or SpeedEstimator()

    def compare(
        self,
        rank1: int,
        rank2: int,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
        seed: int | None = None,
    ) -> ComparisonResult:
        """
        Compare horses at `rank1` and `rank2`.

        Each horse is sampled with its own generator. With a seed, horse 1
        uses `seed` and horse 2 uses `seed + 1`, so results are reproducible.
        On exactly equal estimates `rank1` is reported as faster.

        Raises:
            NotFoundError: If either rank is outside the store
        """
        record1 = self.store.lookup_by_index(rank1)
        record2 = self.store.lookup_by_index(rank2)

        seed1 = seed
        seed2 = seed + 1 if seed is not None else None

        speed1 = self.estimator.mean_speed(record1, sample_count, _random_source(seed1))
        speed2 = self.estimator.mean_speed(record2, sample_count, _random_source(seed2))

        if speed2 > speed1:
            result = ComparisonResult(
                faster_id=rank2,
                slower_id=rank1,
                faster_speed=speed2,
                slower_speed=speed1,
            )
        else:
            result = ComparisonResult(
                faster_id=rank1,
                slower_id=rank2,
                faster_speed=speed1,
                slower_speed=speed2,
            )

        logger.debug(
            f"Compared horse #{rank1} ({speed1:.3f}) vs #{rank2} ({speed2:.3f}) "
            f"with {sample_count} samples: #{result.faster_id} faster"
        )
        return result

    def summary(self, rank: int) -> HorseSummary:
        """Overview of one horse: race count, fastest and slowest race."""
        record = self.store.lookup_by_index(rank)
        fastest_rank, fastest_time = self.estimator.fastest(record)
        slowest_rank, slowest_time = self.estimator.slowest(record)

        return HorseSummary(
            rank=rank,
            entity_id=record.entity_id,
            entry_cost=record.entry_cost,
            races=len(record.finish_times),
            fastest_rank=fastest_rank,
            fastest_time=fastest_time,
            slowest_rank=slowest_rank,
            slowest_time=slowest_time,
            average_speed=self.estimator.average_speed(record),
        )

    def summaries(self) -> list[HorseSummary]:
        return [self.summary(rank) for rank in range(1, len(self.store) + 1)]
