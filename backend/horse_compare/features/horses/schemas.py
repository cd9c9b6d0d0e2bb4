"""
Horse comparison schemas.

Pydantic schemas for API response serialization.
"""

from pydantic import BaseModel, ConfigDict, Field

from .models import ComparisonResult, HorseSummary


class CompareResponse(BaseModel):
    """Comparison result (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    faster_horse: int = Field(..., alias="fasterHorse")
    slower_horse: int = Field(..., alias="slowerHorse")
    faster_speed: float = Field(..., alias="fasterSpeed")
    slower_speed: float = Field(..., alias="slowerSpeed")

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "CompareResponse":
        return cls(
            faster_horse=result.faster_id,
            slower_horse=result.slower_id,
            faster_speed=result.faster_speed,
            slower_speed=result.slower_speed,
        )


class RaceExtremeSchema(BaseModel):
    """Position of a race within the horse's sorted finish times."""
    rank: int
    time_s: float


class HorseSchema(BaseModel):
    """Single horse overview."""
    rank: int = Field(..., description="1-based position in horse-id order")
    horse_id: int
    entry_fee: float
    races: int
    average_speed: float
    fastest: RaceExtremeSchema
    slowest: RaceExtremeSchema

    @classmethod
    def from_summary(cls, summary: HorseSummary) -> "HorseSchema":
        return cls(
            rank=summary.rank,
            horse_id=summary.entity_id,
            entry_fee=summary.entry_cost,
            races=summary.races,
            average_speed=summary.average_speed,
            fastest=RaceExtremeSchema(
                rank=summary.fastest_rank, time_s=summary.fastest_time
            ),
            slowest=RaceExtremeSchema(
                rank=summary.slowest_rank, time_s=summary.slowest_time
            ),
        )
