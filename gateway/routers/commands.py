"""
gateway/routers/commands.py

POST /api/command/{device_id}: the dashboard activates a device's buzzer.
GET  /api/command/{device_id}: the tracker polls for its command (read-and-clear).
"""

import structlog
from fastapi import APIRouter, Depends

from gateway.constants import COMMAND_QUEUED_MESSAGE
from gateway.dependencies import get_store
from gateway.schemas import CommandRecord, MessageResponse
from gateway.services.store import DeviceStateStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/command", tags=["commands"])


@router.post("/{device_id}", response_model=MessageResponse)
async def issue_command(
    device_id: str,
    store: DeviceStateStore = Depends(get_store),
) -> MessageResponse:
    """Set the buzzer flag. Any request body is ignored."""
    store.issue_command(device_id)
    logger.info("command_issued", device_id=device_id)
    return MessageResponse(message=COMMAND_QUEUED_MESSAGE)


@router.get(
    "/{device_id}",
    response_model=CommandRecord,
    response_model_exclude_none=True,
)
async def poll_command(
    device_id: str,
    store: DeviceStateStore = Depends(get_store),
) -> CommandRecord:
    # The caller sees the state from before the reset; a second poll sees inactive.
    return store.read_and_clear_command(device_id)
