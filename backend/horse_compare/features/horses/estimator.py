"""Speed estimation from finish times."""

from __future__ import annotations

import random
from typing import Sequence

from horse_compare.shared.constants import DEFAULT_SPEED_CONSTANT

from .exceptions import DivisionError
from .models import RaceRecord
from .sampler import EmpiricalSampler


class SpeedEstimator:
    """
    Converts finish times to speeds and estimates a horse's mean speed.

    Speed is `speed_constant / finish_time`, so the shortest time is the
    highest speed. Records keep their finish times sorted ascending, which
    puts the fastest race at rank 1.
    """

    def __init__(self, speed_constant: float = DEFAULT_SPEED_CONSTANT):
        self.speed_constant = speed_constant

    def to_speeds(self, finish_times: Sequence[float]) -> list[float]:
        """
        Map finish times to speeds.

        Raises:
            DivisionError: If any finish time is exactly zero
        """
        speeds = []
        for position, t in enumerate(finish_times, start=1):
            if t == 0:
                raise DivisionError(
                    f"Zero finish time at position {position}"
                )
            speeds.append(self.speed_constant / t)
        return speeds

    def mean_speed(
        self,
        record: RaceRecord,
        sample_count: int,
        random_source: random.Random,
    ) -> float:
        """Monte-Carlo mean speed of `record` (0.0 without races)."""
        speeds = self.to_speeds(record.finish_times)
        return EmpiricalSampler.estimate_mean(speeds, sample_count, random_source)

    def fastest(self, record: RaceRecord) -> tuple[int, float]:
        """(1-based position, time) of the minimum finish time; (0, 0.0) if empty."""
        return self._scan(record.finish_times, lambda t, best: t < best)

    def slowest(self, record: RaceRecord) -> tuple[int, float]:
        """(1-based position, time) of the maximum finish time; (0, 0.0) if empty."""
        return self._scan(record.finish_times, lambda t, best: t > best)

    def average_speed(self, record: RaceRecord) -> float:
        """Plain arithmetic mean of the speeds (no resampling)."""
        if not record.finish_times:
            return 0.0
        speeds = self.to_speeds(record.finish_times)
        return sum(speeds) / len(speeds)

    @staticmethod
    def _scan(times: Sequence[float], better) -> tuple[int, float]:
        if not times:
            return 0, 0.0

        best_rank, best_time = 1, times[0]
        for i in range(1, len(times)):
            # first occurrence wins on equal times
            if better(times[i], best_time):
                best_rank, best_time = i + 1, times[i]
        return best_rank, best_time
