from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.emissions_routes import router as emissions_router
from api.places_routes import router as places_router
from api.status import router as status_router
from config import settings
from core.logging_conf import setup_logging
from services.resolver_factory import get_resolver
from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    resolver = get_resolver()
    logger.info(
        "resolver ready (geocoder=%s, router=%s)",
        settings.NOMINATIM_URL,
        settings.OSRM_URL,
    )
    yield
    logger.info("shutting down; caches held %s", resolver.cache_stats())


app = FastAPI(title="CO2 Trip Calculator", lifespan=lifespan)

# CORS (adjust for your frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(emissions_router)
app.include_router(places_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
