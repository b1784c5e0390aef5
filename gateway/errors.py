"""
gateway/errors.py

The relay's only user-facing error: a telemetry report whose body fails shape validation.
Everything else (unknown device, no command) degrades to a default payload instead.
"""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from gateway.constants import TELEMETRY_INVALID_MESSAGE

logger = structlog.get_logger(__name__)


class InvalidTelemetryError(Exception):
    """Raised when a telemetry body is not JSON or lacks numeric latitude/longitude or rssi."""

    def __init__(self, device_id: str, body: str, reason: str) -> None:
        super().__init__(f"invalid telemetry for {device_id}: {reason}")
        self.device_id = device_id
        self.body = body
        self.reason = reason


async def invalid_telemetry_handler(
    request: Request,
    exc: InvalidTelemetryError,
) -> JSONResponse:
    """Log the rejected body and answer 400 with the fixed message."""
    logger.error(
        "telemetry_rejected",
        device_id=exc.device_id,
        body=exc.body,
        error=exc.reason,
    )
    return JSONResponse(
        status_code=400,
        content={"message": TELEMETRY_INVALID_MESSAGE},
    )
