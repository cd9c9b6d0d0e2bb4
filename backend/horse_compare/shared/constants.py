"""
Shared constants for race data and speed estimation.

Single source of truth for CSV column names and estimation defaults.
"""

from enum import Enum


class RaceColumn(str, Enum):
    """
    Column names of the race results CSV.

    Used in:
    - RaceResultsLoader (row parsing)
    - Error messages for malformed rows
    """
    HORSE_ID = "horseId"
    ENTRY_FEE = "entryFee"
    FINISH_TIME = "finishTime"


REQUIRED_COLUMNS: list[RaceColumn] = [
    RaceColumn.HORSE_ID,
    RaceColumn.ENTRY_FEE,
    RaceColumn.FINISH_TIME,
]


# Speed = SPEED_CONSTANT / finish_time
DEFAULT_SPEED_CONSTANT: float = 1000.0

# Draws per horse in a comparison
DEFAULT_SAMPLE_COUNT: int = 1000
MAX_SAMPLE_COUNT: int = 100_000
