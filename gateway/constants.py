"""
gateway/constants.py

Response messages that form part of the HTTP contract with trackers and the dashboard.
Handlers must reference these instead of inlining strings.
"""

# ── Telemetry ────────────────────────────────────────────────
TELEMETRY_ACCEPTED_MESSAGE: str = "Data accepted."
TELEMETRY_INVALID_MESSAGE: str = "Invalid GPS data structure."
TELEMETRY_MISSING_MESSAGE: str = "No data found for device."

# ── Commands ─────────────────────────────────────────────────
COMMAND_QUEUED_MESSAGE: str = "Command queued."

# ── Telemetry record keys owned by the server ────────────────
# Extra fields in a report may not overwrite these.
RESERVED_TELEMETRY_KEYS: frozenset[str] = frozenset(
    {
        "deviceId",
        "device_id",
        "latitude",
        "longitude",
        "rssi",
        "receivedAt",
        "received_at",
    }
)
