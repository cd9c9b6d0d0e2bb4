"""Data models for horse race records (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RaceRecord:
    """Race history of one horse."""

    entity_id: int  # horseId column
    entry_cost: float  # entryFee, informational only
    finish_times: list[float] = field(default_factory=list)  # seconds


@dataclass(frozen=True)
class EmpiricalDistribution:
    """Value-weighted cumulative table used for inverse-transform sampling."""

    values: tuple[float, ...]
    cumulative: tuple[float, ...]  # running sum / total, last == 1.0


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two horses by estimated mean speed."""

    faster_id: int  # rank as requested
    slower_id: int
    faster_speed: float
    slower_speed: float


@dataclass
class HorseSummary:
    """Per-horse overview for the lookup endpoints."""

    rank: int
    entity_id: int
    entry_cost: float
    races: int
    fastest_rank: int
    fastest_time: float
    slowest_rank: int
    slowest_time: float
    average_speed: float
