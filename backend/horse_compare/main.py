"""
Horse Compare API

FastAPI application comparing horses by estimated mean race speed.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI, Request

from horse_compare.config import settings
from horse_compare.api.v1.router import api_router
from horse_compare.api.v1.routes import horses
from horse_compare.features.horses import RaceResultsLoader


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup: a load failure propagates and aborts startup
    logger.info("Starting Horse Compare API...")
    app.state.store = RaceResultsLoader().load_file(settings.races_csv_path)
    logger.info(f"Race data loaded: {len(app.state.store)} horses")

    yield

    # Shutdown
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Horse Compare API",
    description="Compare horses by resampled mean race speed",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")

# Legacy path: GET /compare?horse1=..&horse2=..
app.add_api_route(
    "/compare",
    horses.compare_horses,
    methods=["GET"],
    response_model=horses.CompareResponse,
    tags=["Horses"],
)


# === Health Check ===
@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    store = getattr(request.app.state, "store", None)
    return {
        "status": "healthy" if store is not None else "loading",
        "version": VERSION,
        "horses": len(store) if store is not None else 0,
    }


def run():
    """Console entry point: serve with uvicorn."""
    import uvicorn

    uvicorn.run("horse_compare.main:app", host=settings.host, port=settings.port)
