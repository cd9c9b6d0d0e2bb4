"""
Horses API Routes

Endpoints for horse lookup and mean-speed comparison.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from horse_compare.config import settings
from horse_compare.features.horses import (
    ComparisonService,
    DivisionError,
    InvariantViolation,
    NotFoundError,
    RecordStore,
    SpeedEstimator,
)
from horse_compare.features.horses.schemas import CompareResponse, HorseSchema

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Dependencies
# =============================================================================

def get_store(request: Request) -> RecordStore:
    """Finalized record store loaded at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Race data not loaded")
    return store


def get_comparison_service(
    store: RecordStore = Depends(get_store),
) -> ComparisonService:
    return ComparisonService(store, SpeedEstimator(settings.speed_constant))


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/compare", response_model=CompareResponse)
def compare_horses(
    horse1: int = Query(..., ge=1, description="Rank of the first horse"),
    horse2: int = Query(..., ge=1, description="Rank of the second horse"),
    samples: Optional[int] = Query(None, ge=1, description="Draws per horse"),
    seed: Optional[int] = Query(None, description="Seed for reproducible sampling"),
    service: ComparisonService = Depends(get_comparison_service),
):
    """Compare two horses (by rank) by Monte-Carlo mean speed."""
    sample_count = samples or settings.sample_count
    if sample_count > settings.max_sample_count:
        raise HTTPException(
            status_code=400,
            detail=f"samples must be <= {settings.max_sample_count}",
        )
    if seed is None:
        seed = settings.sampling_seed

    try:
        result = service.compare(horse1, horse2, sample_count=sample_count, seed=seed)
    except NotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (DivisionError, InvariantViolation) as e:
        logger.error(f"Comparison of #{horse1} vs #{horse2} failed: {e}")
        raise HTTPException(status_code=500, detail="Internal estimation error")

    return CompareResponse.from_result(result)


@router.get("", response_model=list[HorseSchema])
def list_horses(service: ComparisonService = Depends(get_comparison_service)):
    """All horses in rank order."""
    try:
        summaries = service.summaries()
    except DivisionError as e:
        logger.error(f"Horse listing failed: {e}")
        raise HTTPException(status_code=500, detail="Internal estimation error")
    return [HorseSchema.from_summary(s) for s in summaries]


@router.get("/{rank}", response_model=HorseSchema)
def get_horse(
    rank: int,
    service: ComparisonService = Depends(get_comparison_service),
):
    """Single horse with its fastest and slowest race."""
    try:
        summary = service.summary(rank)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DivisionError as e:
        logger.error(f"Horse #{rank} summary failed: {e}")
        raise HTTPException(status_code=500, detail="Internal estimation error")
    return HorseSchema.from_summary(summary)
