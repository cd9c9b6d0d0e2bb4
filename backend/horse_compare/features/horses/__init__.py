"""
Horse speed comparison module.

Usage:
    from horse_compare.features.horses import RaceResultsLoader, ComparisonService

    store = RaceResultsLoader().load_file("races.csv")
    result = ComparisonService(store).compare(1, 2, sample_count=1000)

Components:
- RecordStore: In-memory race records, addressed by rank
- EmpiricalSampler: Value-weighted inverse-CDF sampling
- SpeedEstimator: Finish times → speeds, Monte-Carlo mean speed
- ComparisonService: Orders two horses by estimated mean speed
- RaceResultsLoader: CSV → finalized RecordStore
"""

from .exceptions import (
    HorseDataError,
    ParseError,
    NotFoundError,
    EmptyInputError,
    DivisionError,
    InvariantViolation,
    StoreFinalizedError,
)
from .models import RaceRecord, EmpiricalDistribution, ComparisonResult, HorseSummary
from .store import RecordStore
from .sampler import EmpiricalSampler
from .estimator import SpeedEstimator
from .service import ComparisonService
from .loader import RaceResultsLoader

__all__ = [
    # Errors
    "HorseDataError",
    "ParseError",
    "NotFoundError",
    "EmptyInputError",
    "DivisionError",
    "InvariantViolation",
    "StoreFinalizedError",
    # Models
    "RaceRecord",
    "EmpiricalDistribution",
    "ComparisonResult",
    "HorseSummary",
    # Components
    "RecordStore",
    "EmpiricalSampler",
    "SpeedEstimator",
    "ComparisonService",
    "RaceResultsLoader",
]
