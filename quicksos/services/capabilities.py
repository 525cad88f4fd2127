"""Capability interfaces the SOS core calls through, plus simple in-process adapters."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class Clipboard(Protocol):
    def write_text(self, text: str) -> None: ...


class DispatchSurface(Protocol):
    def open(self, uri: str) -> None: ...


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float


class ProbeError(str, enum.Enum):
    UNSUPPORTED = "unsupported"
    DENIED = "denied"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"


class PositionError(Exception):
    """Raised by a position sensor when no fix can be produced."""

    reason = ProbeError.UNAVAILABLE


class PermissionDeniedError(PositionError):
    reason = ProbeError.DENIED


class PositionUnavailableError(PositionError):
    reason = ProbeError.UNAVAILABLE


class PositionTimeoutError(PositionError):
    reason = ProbeError.TIMEOUT


class PositionUnsupportedError(PositionError):
    reason = ProbeError.UNSUPPORTED


class PositionSensor(Protocol):
    async def current_position(
        self,
        *,
        high_accuracy: bool,
        maximum_age_ms: int,
        timeout_ms: int,
    ) -> Position: ...


class ReportedPositionSensor:
    """Sensor backed by coordinates the client already measured (e.g. browser geolocation)."""

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        error: ProbeError | None = None,
    ) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.error = error

    async def current_position(self, *, high_accuracy: bool, maximum_age_ms: int, timeout_ms: int) -> Position:
        if self.error == ProbeError.DENIED:
            raise PermissionDeniedError("Location permission denied by client")
        if self.error == ProbeError.TIMEOUT:
            raise PositionTimeoutError("Client location request timed out")
        if self.error == ProbeError.UNSUPPORTED:
            raise PositionUnsupportedError("Client has no location support")
        if self.error is not None or self.latitude is None or self.longitude is None:
            raise PositionUnavailableError("Client did not report a position")
        return Position(latitude=self.latitude, longitude=self.longitude)


class MemoryClipboard:
    """Clipboard that keeps the last written text in memory."""

    def __init__(self) -> None:
        self.text: str = ""

    def write_text(self, text: str) -> None:
        self.text = text


class RecordingDispatchSurface:
    """Dispatch surface that records the URI for the client to open."""

    def __init__(self) -> None:
        self.last_uri: str = ""

    def open(self, uri: str) -> None:
        self.last_uri = uri
