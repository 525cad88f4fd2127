"""Key-value store adapters."""

from __future__ import annotations

from sqlalchemy.orm import Session

from quicksos.models.kv_entry import KvEntry


class SqlKeyValueStore:
    """KeyValueStore over the kv_entries table. Every set commits."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, key: str) -> str | None:
        entry = self.db.get(KvEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = self.db.get(KvEntry, key)
        if entry is None:
            self.db.add(KvEntry(key=key, value=value))
        else:
            entry.value = value
        self.db.commit()


class InMemoryKeyValueStore:
    """Dict-backed store; `writes` counts set() calls."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes += 1
