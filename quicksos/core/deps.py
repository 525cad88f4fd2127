"""FastAPI dependencies: stores bound to the request session, process-wide SOS session."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from quicksos.db.session import get_db
from quicksos.services.capabilities import MemoryClipboard, RecordingDispatchSurface
from quicksos.services.contact_store import ContactStore, UserProfile
from quicksos.services.kv_store import SqlKeyValueStore
from quicksos.services.sos_coordinator import SosSession


class ApiSession:
    """Transient state shared by requests of the single user session."""

    def __init__(self) -> None:
        self.sos = SosSession()
        self.dispatch = RecordingDispatchSurface()
        self.clipboard = MemoryClipboard()


# Singleton instance used across the app
api_session = ApiSession()


def get_api_session() -> ApiSession:
    return api_session


def get_contact_store(db: Session = Depends(get_db)) -> ContactStore:
    return ContactStore(SqlKeyValueStore(db))


def get_user_profile(db: Session = Depends(get_db)) -> UserProfile:
    return UserProfile(SqlKeyValueStore(db))
