"""
gateway/services/store.py

In-memory state store for device telemetry and buzzer commands.
One instance is created per process at startup and injected into the routers.
Nothing here survives a restart.
"""

import threading
import time
from typing import Any, Callable, Optional

import structlog

from gateway.constants import RESERVED_TELEMETRY_KEYS
from gateway.schemas import CommandRecord, TelemetryRecord

logger = structlog.get_logger(__name__)


def now_ms() -> int:
    """Current server time in epoch milliseconds."""
    return int(time.time() * 1000)


class DeviceStateStore:
    """
    Two tables keyed by device id: latest telemetry and pending command.

    A single lock guards both tables. Writes are last-writer-wins;
    read_and_clear_command reads and resets inside the same critical section
    so a command issued once is observed as active by exactly one poller.
    """

    def __init__(self, clock: Callable[[], int] = now_ms) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._telemetry: dict[str, TelemetryRecord] = {}
        self._commands: dict[str, CommandRecord] = {}

    # ── Telemetry ────────────────────────────────────────────

    def set_telemetry(
        self,
        device_id: str,
        latitude: float,
        longitude: float,
        rssi: Any,
        extra: Optional[dict[str, Any]] = None,
    ) -> TelemetryRecord:
        """Replace the device's telemetry wholesale, stamping server time."""
        passthrough = {
            key: value
            for key, value in (extra or {}).items()
            if key not in RESERVED_TELEMETRY_KEYS
        }
        with self._lock:
            record = TelemetryRecord(
                device_id=device_id,
                latitude=latitude,
                longitude=longitude,
                rssi=rssi,
                received_at=self._clock(),
                **passthrough,
            )
            self._telemetry[device_id] = record
        return record

    def get_telemetry(self, device_id: str) -> Optional[TelemetryRecord]:
        """Return the latest record, or None if the device never reported."""
        with self._lock:
            return self._telemetry.get(device_id)

    def device_ids(self) -> list[str]:
        with self._lock:
            return sorted(self._telemetry)

    # ── Commands ─────────────────────────────────────────────

    def issue_command(self, device_id: str) -> CommandRecord:
        """Activate the buzzer for a device. Re-issuing while pending changes only the timestamp."""
        with self._lock:
            record = CommandRecord(
                device_id=device_id,
                buzzer_active=True,
                issued_at=self._clock(),
            )
            self._commands[device_id] = record
        return record

    def read_and_clear_command(self, device_id: str) -> CommandRecord:
        """
        Return the device's command as it was before this call.

        An active buzzer flag is reset to inactive atomically with the read,
        so concurrent pollers cannot both observe it.
        """
        cleared = False
        with self._lock:
            current = self._commands.get(device_id)
            if current is None:
                return CommandRecord(device_id=device_id)
            if current.buzzer_active:
                self._commands[device_id] = CommandRecord(
                    device_id=device_id,
                    buzzer_active=False,
                    issued_at=self._clock(),
                )
                cleared = True

        if cleared:
            logger.info("command_cleared", device_id=device_id)
        return current
