"""
Shared constants (NOT business logic).

Usage:
    from horse_compare.shared import RaceColumn, DEFAULT_SPEED_CONSTANT
"""
from .constants import (
    RaceColumn,
    REQUIRED_COLUMNS,
    DEFAULT_SPEED_CONSTANT,
    DEFAULT_SAMPLE_COUNT,
    MAX_SAMPLE_COUNT,
)

__all__ = [
    "RaceColumn",
    "REQUIRED_COLUMNS",
    "DEFAULT_SPEED_CONSTANT",
    "DEFAULT_SAMPLE_COUNT",
    "MAX_SAMPLE_COUNT",
]
