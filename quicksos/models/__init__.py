"""SQLAlchemy models."""

from __future__ import annotations

from quicksos.models.kv_entry import KvEntry

__all__ = ["KvEntry"]
