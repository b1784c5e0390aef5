"""
tests/fixtures.py

Shared builders for telemetry bodies plus a controllable clock for the store.
Tests should build report bodies here rather than inlining coordinates.
"""

from typing import Any


def build_report(
    latitude: Any = 14.6,
    longitude: Any = 120.9,
    rssi: Any = -80,
    **extra: Any,
) -> dict[str, Any]:
    """Build a telemetry report body with sensible defaults for testing."""
    return {"latitude": latitude, "longitude": longitude, "rssi": rssi, **extra}


class FakeClock:
    """Deterministic epoch-millisecond clock for DeviceStateStore."""

    def __init__(self, start: int = 1_718_430_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


# ── Test devices ────────────────────────────────────────────

TEST_DEVICE_ID: str = "dev1"
OTHER_DEVICE_ID: str = "dev2"
