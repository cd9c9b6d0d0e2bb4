"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from horse_compare.shared.constants import (
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SPEED_CONSTANT,
    MAX_SAMPLE_COUNT,
)

# Project root: horse-compare/
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Server ===
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # === Race data ===
    races_csv_path: Path = Field(
        default=PROJECT_ROOT / "races.csv",
        description="CSV with horseId, entryFee, finishTime columns"
    )

    # === Estimation ===
    sample_count: int = Field(
        default=DEFAULT_SAMPLE_COUNT,
        description="Monte-Carlo draws per horse"
    )
    max_sample_count: int = Field(
        default=MAX_SAMPLE_COUNT,
        description="Upper bound for the per-request samples parameter"
    )
    speed_constant: float = Field(
        default=DEFAULT_SPEED_CONSTANT,
        description="Speed = speed_constant / finish_time"
    )
    sampling_seed: Optional[int] = Field(
        default=None,
        description="Fixed seed for reproducible comparisons"
    )

    @field_validator('sample_count', 'max_sample_count')
    @classmethod
    def check_positive_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample counts must be >= 1")
        return v

    @field_validator('speed_constant')
    @classmethod
    def check_speed_constant(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("speed_constant must be positive")
        return v

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
