"""Location probe tests: one request, bounded wait, failures become Unknown."""

import asyncio

from quicksos.services.capabilities import (
    PermissionDeniedError,
    Position,
    ProbeError,
    ReportedPositionSensor,
)
from quicksos.services.location_probe import LocationProbe


class RecordingSensor:
    def __init__(self, position=None, exc=None, delay=0.0):
        self.position = position
        self.exc = exc
        self.delay = delay
        self.calls = []

    async def current_position(self, **options):
        self.calls.append(options)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.exc:
            raise self.exc
        return self.position


def test_single_high_accuracy_uncached_request():
    sensor = RecordingSensor(position=Position(37.123456789, -122.5))

    fix = asyncio.run(LocationProbe(sensor).acquire_once())

    assert fix.known
    assert fix.latitude == 37.123456789  # full precision kept until the link is built
    assert fix.longitude == -122.5
    assert sensor.calls == [{"high_accuracy": True, "maximum_age_ms": 0, "timeout_ms": 10000}]


def test_caller_timeout_passed_to_sensor():
    sensor = RecordingSensor(position=Position(1.0, 2.0))
    asyncio.run(LocationProbe(sensor).acquire_once(2500))
    assert sensor.calls[0]["timeout_ms"] == 2500


def test_no_sensor_is_unknown():
    fix = asyncio.run(LocationProbe(None).acquire_once())
    assert not fix.known
    assert fix.failure == ProbeError.UNSUPPORTED


def test_permission_denied_is_unknown():
    sensor = RecordingSensor(exc=PermissionDeniedError("nope"))
    fix = asyncio.run(LocationProbe(sensor).acquire_once())
    assert not fix.known
    assert fix.failure == ProbeError.DENIED


def test_sensor_ignoring_timeout_still_bounded():
    """A sensor that hangs past the bound resolves to Unknown/timeout."""
    sensor = RecordingSensor(position=Position(1.0, 2.0), delay=5)
    fix = asyncio.run(LocationProbe(sensor).acquire_once(50))
    assert not fix.known
    assert fix.failure == ProbeError.TIMEOUT


def test_unexpected_sensor_error_is_unknown():
    sensor = RecordingSensor(exc=RuntimeError("gps chip on fire"))
    fix = asyncio.run(LocationProbe(sensor).acquire_once())
    assert fix.failure == ProbeError.UNAVAILABLE


def test_reported_sensor_without_coordinates_is_unavailable():
    fix = asyncio.run(LocationProbe(ReportedPositionSensor()).acquire_once())
    assert fix.failure == ProbeError.UNAVAILABLE


def test_reported_sensor_with_coordinates():
    fix = asyncio.run(LocationProbe(ReportedPositionSensor(40.7128, -74.006)).acquire_once())
    assert (fix.latitude, fix.longitude) == (40.7128, -74.006)


def test_sensor_returning_nothing_is_unknown():
    """A sensor that resolves without coordinates still yields an Unknown fix."""
    fix = asyncio.run(LocationProbe(RecordingSensor(position=None)).acquire_once())
    assert not fix.known
    assert fix.failure == ProbeError.UNAVAILABLE


def test_reported_sensor_unsupported_keeps_reason():
    sensor = ReportedPositionSensor(error=ProbeError.UNSUPPORTED)
    fix = asyncio.run(LocationProbe(sensor).acquire_once())
    assert fix.failure == ProbeError.UNSUPPORTED
