"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from quicksos.core.config import settings
from quicksos.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)) -> dict:
    """Report API status and whether contact storage is reachable."""
    db.execute(text("SELECT 1"))
    return {"status": "ok", "app": settings.app_name, "storage": "ok"}
