"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from horse_compare.api.v1.routes import horses

api_router = APIRouter()

api_router.include_router(horses.router, prefix="/horses", tags=["Horses"])
