import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from geotarget.api.ads import router as ads_router
from geotarget.api.geo import router as geo_router
from geotarget.config import settings
from geotarget.geo.countries import COUNTRY_NAME_TO_CODE, validate_country_table

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Geo-Targeting Service")
    validate_country_table()
    logger.info("Country table validation passed (%d countries)", len(COUNTRY_NAME_TO_CODE))

    yield

    logger.info("Geo-Targeting Service stopped")


app = FastAPI(
    title="Geo-Targeting Service",
    description="Country normalization and ad geo-targeting decisions",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(geo_router)
app.include_router(ads_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
