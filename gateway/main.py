"""
gateway/main.py

FastAPI application entry point for the tracker relay.
Creates the in-memory state store on startup, seeds the placeholder device,
and registers routers, CORS and the telemetry error handler.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from gateway.errors import InvalidTelemetryError, invalid_telemetry_handler
from gateway.log_config import configure_logging
from gateway.routers.commands import router as commands_router
from gateway.routers.telemetry import router as telemetry_router
from gateway.services.store import DeviceStateStore

logger = structlog.get_logger(__name__)


def parse_origins(raw: str) -> list[str]:
    """Split the comma-separated CORS setting, dropping whitespace and empty entries."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def seed_default_device(store: DeviceStateStore) -> None:
    """Give the configured placeholder device a known position for manual testing."""
    store.set_telemetry(
        settings.default_device_id,
        latitude=settings.default_latitude,
        longitude=settings.default_longitude,
        rssi=settings.default_rssi,
    )
    logger.info("default_device_seeded", device_id=settings.default_device_id)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: build the store on startup."""
    configure_logging(settings.log_level)
    store = DeviceStateStore()
    if settings.seed_default_device:
        seed_default_device(store)
    app.state.store = store
    logger.info("relay_starting", port=settings.port)
    yield
    logger.info("relay_shutting_down", devices=len(store.device_ids()))


app = FastAPI(
    title="Tracker Relay",
    description="Polling relay between location trackers and the monitoring dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_origins(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(InvalidTelemetryError, invalid_telemetry_handler)

app.include_router(telemetry_router)
app.include_router(commands_router)


def serve() -> None:
    """Run the relay with uvicorn on the configured host and port."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
