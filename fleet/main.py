import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fleet.config import settings
from fleet.dependencies import vehicle_store
from fleet.routers.vehicles import router as vehicles_router
from fleet.seed import seed_store
from fleet.utils.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.vehicles_file:
        seed_store(vehicle_store, settings.vehicles_file)
    else:
        logger.info("No vehicles file configured, starting with an empty store")
    yield


app = FastAPI(
    title="Fleet Vehicles API",
    description="In-memory vehicle records with queries and per-brand averages",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(vehicles_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": "fleet-vehicles-api", "version": "0.1.0"}, "message": None}
