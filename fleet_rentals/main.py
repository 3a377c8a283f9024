import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fleet_rentals.api.deps import get_engine
from fleet_rentals.api.errors import register_exception_handlers
from fleet_rentals.api.routers.cars import router as cars_router
from fleet_rentals.api.routers.clients import router as clients_router
from fleet_rentals.api.routers.employees import router as employees_router
from fleet_rentals.api.routers.health import router as health_router
from fleet_rentals.api.routers.rentals import router as rentals_router
from fleet_rentals.config import get_settings
from fleet_rentals.infrastructure.db.tables import metadata

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_settings().use_in_memory:
        logger.info("Starting with in-memory storage")
        yield
        return
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready", extra={"environment": get_settings().environment})
    yield
    await engine.dispose()


app = FastAPI(
    title="Fleet Rentals API",
    version="0.1.0",
    lifespan=lifespan
)

register_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(rentals_router, prefix="/api/v1", tags=["Rentals"])
app.include_router(cars_router, prefix="/api/v1", tags=["Cars"])
app.include_router(clients_router, prefix="/api/v1", tags=["Clients"])
app.include_router(employees_router, prefix="/api/v1", tags=["Employees"])
