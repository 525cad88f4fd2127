"""Single-shot, timeout-bounded location acquisition."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from quicksos.core.sos_policies import DEFAULT_LOCATION_TIMEOUT_MS
from quicksos.services.capabilities import PositionError, PositionSensor, ProbeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationFix:
    """Known coordinates, or Unknown with the reason the probe gave up."""

    latitude: float | None = None
    longitude: float | None = None
    failure: ProbeError | None = None

    @property
    def known(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def unknown(cls, failure: ProbeError) -> "LocationFix":
        return cls(failure=failure)


class LocationProbe:
    """Asks a position sensor for one fresh, high-accuracy fix.

    Failures never escape: no sensor, a denied permission, a timeout or any
    sensor error all resolve to an Unknown fix. The sensor call is wrapped in
    its own timer so the probe returns within the bound even when the sensor
    ignores the timeout it is given.
    """

    def __init__(self, sensor: PositionSensor | None) -> None:
        self.sensor = sensor

    async def acquire_once(self, timeout_ms: int = DEFAULT_LOCATION_TIMEOUT_MS) -> LocationFix:
        if self.sensor is None:
            logger.warning("Location unavailable: no position sensor")
            return LocationFix.unknown(ProbeError.UNSUPPORTED)

        try:
            request = self.sensor.current_position(
                high_accuracy=True,
                maximum_age_ms=0,
                timeout_ms=timeout_ms,
            )
            pos = await asyncio.wait_for(request, timeout=timeout_ms / 1000)
            fix = LocationFix(latitude=float(pos.latitude), longitude=float(pos.longitude))
        except asyncio.TimeoutError:
            logger.warning("Location unavailable: no fix within %sms", timeout_ms)
            return LocationFix.unknown(ProbeError.TIMEOUT)
        except PositionError as exc:
            logger.warning("Location unavailable (%s): %s", exc.reason.value, exc)
            return LocationFix.unknown(exc.reason)
        except Exception as exc:  # noqa: BLE001 - location is best-effort
            logger.warning("Location unavailable: sensor failed: %s", exc)
            return LocationFix.unknown(ProbeError.UNAVAILABLE)

        logger.debug("Location fix acquired")
        return fix
