"""Empirical distribution sampling.

The cumulative weight at index i is the running *sum of values* up to i,
normalized by the total. Larger values are therefore drawn proportionally
more often (value-weighted, not a uniform bootstrap).

    values      [100, 50, 25]
    cumulative  [0.571, 0.857, 1.0]
"""

from __future__ import annotations

import random
import statistics
from bisect import bisect_left
from typing import Sequence

from .exceptions import EmptyInputError, InvariantViolation
from .models import EmpiricalDistribution


class EmpiricalSampler:
    """Builds value-weighted cumulative tables and samples from them."""

    @staticmethod
    def build(values: Sequence[float]) -> EmpiricalDistribution:
        """
        Build the cumulative-weight table for `values`.

        Raises:
            EmptyInputError: If `values` is empty or sums to <= 0
        """
        running_sums = []
        running = 0.0
        for value in values:
            running += value
            running_sums.append(running)

        # divide by the same running total so the last entry is exactly 1.0
        total = running
        if not values or total <= 0:
            raise EmptyInputError(
                f"Cannot normalize distribution over {len(values)} values "
                f"(sum={total})"
            )

        cumulative = [s / total for s in running_sums]

        return EmpiricalDistribution(
            values=tuple(values),
            cumulative=tuple(cumulative),
        )

    @staticmethod
    def sample(distribution: EmpiricalDistribution, u: float) -> float:
        """
        Inverse-CDF lookup: value at the leftmost index with cumulative >= u.

        Raises:
            InvariantViolation: If u lies above the last cumulative weight
        """
        index = bisect_left(distribution.cumulative, u)
        if index >= len(distribution.values):
            raise InvariantViolation(
                f"No cumulative weight >= {u} "
                f"(last={distribution.cumulative[-1] if distribution.cumulative else None})"
            )
        return distribution.values[index]

    @classmethod
    def estimate_mean(
        cls,
        values: Sequence[float],
        sample_count: int,
        random_source: random.Random,
    ) -> float:
        """
        Monte-Carlo mean of `sample_count` draws from the distribution.

        Returns 0.0 when `values` is empty or carries no positive weight:
        a horse without races is a valid query target with zero estimated
        speed.
        """
        if sample_count < 1:
            raise ValueError(f"sample_count must be >= 1, got {sample_count}")
        if not values:
            return 0.0

        try:
            distribution = cls.build(values)
        except EmptyInputError:
            return 0.0

        draws = [
            cls.sample(distribution, random_source.random())
            for _ in range(sample_count)
        ]
        # exact rational mean: a constant input yields exactly that constant
        return statistics.mean(draws)
