"""
gateway/routers/telemetry.py

POST /api/data/{device_id}: a tracker reports its latest position and signal strength.
GET  /api/data/{device_id}: the dashboard polls a device's latest position.
"""

from typing import Union

import structlog
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from gateway.constants import TELEMETRY_ACCEPTED_MESSAGE, TELEMETRY_MISSING_MESSAGE
from gateway.dependencies import get_store
from gateway.errors import InvalidTelemetryError
from gateway.schemas import (
    MessageResponse,
    TelemetryMissing,
    TelemetryRecord,
    TelemetryReport,
)
from gateway.services.store import DeviceStateStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/data", tags=["telemetry"])


@router.post("/{device_id}", response_model=MessageResponse)
async def report_telemetry(
    device_id: str,
    request: Request,
    store: DeviceStateStore = Depends(get_store),
) -> MessageResponse:
    """
    Accept a telemetry report from a tracker.

    The body is validated here rather than by FastAPI so that malformed JSON,
    non-object bodies and wrong-typed fields all produce the same 400.
    Only the shape is checked: no coordinate ranges, no type check on rssi.
    """
    raw = await request.body()
    try:
        report = TelemetryReport.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidTelemetryError(
            device_id,
            raw.decode("utf-8", errors="replace"),
            str(exc),
        ) from exc

    store.set_telemetry(
        device_id,
        latitude=report.latitude,
        longitude=report.longitude,
        rssi=report.rssi,
        extra=report.model_extra,
    )
    logger.info(
        "telemetry_updated",
        device_id=device_id,
        latitude=report.latitude,
        longitude=report.longitude,
    )
    return MessageResponse(message=TELEMETRY_ACCEPTED_MESSAGE)


@router.get("/{device_id}", response_model=None)
async def read_telemetry(
    device_id: str,
    store: DeviceStateStore = Depends(get_store),
) -> Union[TelemetryRecord, TelemetryMissing]:
    """Return the latest telemetry, or a 200 placeholder with null coordinates."""
    record = store.get_telemetry(device_id)
    if record is None:
        return TelemetryMissing(message=TELEMETRY_MISSING_MESSAGE)
    return record
