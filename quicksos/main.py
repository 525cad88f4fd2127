"""quicksos FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from quicksos.api import contacts, health, profile, sos
from quicksos.core.config import settings
from quicksos.db.base import Base
from quicksos.db.session import engine
from quicksos.models import KvEntry  # noqa: F401 - register for create_all

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(profile.router)
app.include_router(contacts.router)
app.include_router(sos.router)
