"""SOS send / copy API."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException, status

from quicksos.core.config import settings
from quicksos.core.deps import ApiSession, get_api_session, get_contact_store, get_user_profile
from quicksos.schemas.sos import SosCopyResponse, SosLastResponse, SosSendRequest, SosSendResponse
from quicksos.services.capabilities import ProbeError, ReportedPositionSensor
from quicksos.services.contact_store import ContactStore, UserProfile
from quicksos.services.location_probe import LocationProbe
from quicksos.services.sos_coordinator import SosCoordinator

router = APIRouter(prefix="/sos", tags=["sos"])


def _coordinator(
    store: ContactStore,
    profile: UserProfile,
    session: ApiSession,
    sensor: ReportedPositionSensor | None = None,
) -> SosCoordinator:
    return SosCoordinator(
        contacts=store,
        profile=profile,
        probe=LocationProbe(sensor),
        dispatch=session.dispatch,
        clipboard=session.clipboard,
        session=session.sos,
        location_timeout_ms=settings.location_timeout_ms,
    )


@router.post("/send", response_model=SosSendResponse)
async def send_sos(
    data: SosSendRequest | None = Body(default=None),
    store: ContactStore = Depends(get_contact_store),
    profile: UserProfile = Depends(get_user_profile),
    session: ApiSession = Depends(get_api_session),
):
    """Compose the SOS and return the sms: URI for the client to open."""
    d = data or SosSendRequest()
    sensor = ReportedPositionSensor(
        latitude=d.latitude,
        longitude=d.longitude,
        error=ProbeError(d.error) if d.error else None,
    )
    result = await _coordinator(store, profile, session, sensor).send()
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.status)

    report = session.sos.report
    return SosSendResponse(
        status=result.status,
        state=session.sos.state.value,
        message=report.message,
        map_link=report.map_link,
        dispatch_uri=session.dispatch.last_uri,
    )


@router.post("/copy", response_model=SosCopyResponse)
def copy_message(
    store: ContactStore = Depends(get_contact_store),
    profile: UserProfile = Depends(get_user_profile),
    session: ApiSession = Depends(get_api_session),
):
    """Put the last composed message on the clipboard."""
    result = _coordinator(store, profile, session).copy_last_message()
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.status)
    return SosCopyResponse(status=result.status, text=session.clipboard.text)


@router.get("/last", response_model=SosLastResponse)
def last_report(session: ApiSession = Depends(get_api_session)):
    """Last composed message preview and current status."""
    report = session.sos.report
    if report is None:
        return SosLastResponse(status=session.sos.status)
    return SosLastResponse(
        status=session.sos.status,
        message=report.message,
        map_link=report.map_link,
        dispatch_uri=report.dispatch_uri,
    )
