"""SOS send orchestration."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from quicksos.core.sos_policies import (
    DEFAULT_LOCATION_TIMEOUT_MS,
    STATUS_COPIED,
    STATUS_DISPATCHED,
    STATUS_LOCATING,
    STATUS_NO_CONTACTS,
    STATUS_NOTHING_TO_COPY,
)
from quicksos.services.capabilities import Clipboard, DispatchSurface, ProbeError
from quicksos.services.contact_store import ContactStore, UserProfile
from quicksos.services.location_probe import LocationProbe
from quicksos.services.message_composer import compose, encode_dispatch_target

logger = logging.getLogger(__name__)


class SosState(str, enum.Enum):
    IDLE = "IDLE"
    LOCATING_LOCATION = "LOCATING_LOCATION"
    COMPOSING = "COMPOSING"
    DISPATCHING = "DISPATCHING"


class PreconditionError(str, enum.Enum):
    NO_CONTACTS = "no_contacts"
    NOTHING_TO_COPY = "nothing_to_copy"


@dataclass(frozen=True)
class SosReport:
    message: str
    map_link: str
    dispatch_uri: str


@dataclass
class SosSession:
    """Transient per-session state: never persisted."""

    state: SosState = SosState.IDLE
    status: str = ""
    report: SosReport | None = None
    status_log: list[str] = field(default_factory=list)

    def set_status(self, status: str) -> None:
        self.status = status
        self.status_log.append(status)


@dataclass(frozen=True)
class SosResult:
    status: str
    error: PreconditionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SosCoordinator:
    """Runs one send: locate, compose, hand off to the dispatch surface.

    A coordinator is not reentrant; overlapping send() calls on the same
    instance are not supported.
    """

    def __init__(
        self,
        contacts: ContactStore,
        profile: UserProfile,
        probe: LocationProbe,
        dispatch: DispatchSurface,
        clipboard: Clipboard,
        session: SosSession | None = None,
        clock: Callable[[], datetime] = datetime.now,
        location_timeout_ms: int = DEFAULT_LOCATION_TIMEOUT_MS,
    ) -> None:
        self.contacts = contacts
        self.profile = profile
        self.probe = probe
        self.dispatch = dispatch
        self.clipboard = clipboard
        self.session = session or SosSession()
        self.clock = clock
        self.location_timeout_ms = location_timeout_ms

    @property
    def state(self) -> SosState:
        return self.session.state

    @property
    def last_report(self) -> SosReport | None:
        return self.session.report

    async def send(self) -> SosResult:
        if not self.contacts.list():
            self.session.set_status(STATUS_NO_CONTACTS)
            return SosResult(STATUS_NO_CONTACTS, PreconditionError.NO_CONTACTS)

        try:
            self.session.state = SosState.LOCATING_LOCATION
            self.session.set_status(STATUS_LOCATING)
            fix = await self.probe.acquire_once(self.location_timeout_ms)

            self.session.state = SosState.COMPOSING
            composed = compose(self.profile.name, fix, self.clock())
            uri = encode_dispatch_target(self.contacts.recipients_csv(), composed.text)
            self.session.report = SosReport(
                message=composed.text,
                map_link=composed.map_link,
                dispatch_uri=uri,
            )

            self.session.state = SosState.DISPATCHING
            self.session.set_status(STATUS_DISPATCHED)
            logger.info(
                "SOS dispatched to %s contact(s), location=%s",
                len(self.contacts),
                "known" if fix.known else (fix.failure or ProbeError.UNAVAILABLE).value,
            )
            self.dispatch.open(uri)
        finally:
            self.session.state = SosState.IDLE

        return SosResult(STATUS_DISPATCHED)

    def copy_last_message(self) -> SosResult:
        report = self.session.report
        if report is None or not report.message:
            self.session.set_status(STATUS_NOTHING_TO_COPY)
            return SosResult(STATUS_NOTHING_TO_COPY, PreconditionError.NOTHING_TO_COPY)

        self.clipboard.write_text(report.message)
        self.session.set_status(STATUS_COPIED)
        return SosResult(STATUS_COPIED)
