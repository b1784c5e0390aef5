"""
gateway/schemas.py

Pydantic data models for the relay.
- TelemetryReport: incoming body of a tracker's position report
- TelemetryRecord / CommandRecord: what the state store holds per device
- TelemetryMissing / MessageResponse: fixed-shape response bodies

Stored records serialize with camelCase keys (deviceId, receivedAt, buzzerActive, issuedAt).
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

# A finite JSON number: rejects numeric strings, booleans, NaN and overflow to inf
JsonNumber = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class TelemetryReport(BaseModel):
    """Position and signal report pushed by a tracker."""

    model_config = ConfigDict(extra="allow")

    latitude: JsonNumber
    longitude: JsonNumber
    rssi: Any  # only presence is checked; null is accepted


class TelemetryRecord(BaseModel):
    """Latest telemetry for one device, stamped with server receive time (epoch ms)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    device_id: str
    latitude: Union[int, float]
    longitude: Union[int, float]
    rssi: Any
    received_at: int


class TelemetryMissing(BaseModel):
    """Placeholder returned when a device has never reported."""

    message: str
    latitude: None = None
    longitude: None = None


class CommandRecord(BaseModel):
    """Buzzer command state for one device. issued_at is epoch ms."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    device_id: str
    buzzer_active: bool = False
    issued_at: Optional[int] = None


class MessageResponse(BaseModel):
    message: str
