"""Trusted contact list and user profile, persisted through a key-value store."""

from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Callable

from pydantic import TypeAdapter, ValidationError

from quicksos.core.sos_policies import (
    DEFAULT_CONTACT_LABEL,
    MIN_PHONE_DIGITS,
    STATUS_BLOCKED_NUMBER,
    STATUS_CONTACT_SAVED,
    STATUS_ENTER_PHONE,
    STATUS_TOO_SHORT,
    STORAGE_CONTACTS,
    STORAGE_NAME,
)
from quicksos.schemas.contact import StoredContact
from quicksos.services.capabilities import KeyValueStore
from quicksos.services.phone import is_blocked_number, normalize_phone

logger = logging.getLogger(__name__)

_contact_list = TypeAdapter(list[StoredContact])


class ContactValidationError(str, enum.Enum):
    EMPTY_PHONE = "empty_phone"
    BLOCKED_NUMBER = "blocked_number"
    TOO_SHORT = "too_short"

    @property
    def status(self) -> str:
        return _VALIDATION_STATUS[self]


_VALIDATION_STATUS = {
    ContactValidationError.EMPTY_PHONE: STATUS_ENTER_PHONE,
    ContactValidationError.BLOCKED_NUMBER: STATUS_BLOCKED_NUMBER,
    ContactValidationError.TOO_SHORT: STATUS_TOO_SHORT,
}


@dataclass(frozen=True)
class Contact:
    id: str
    name: str
    phone: str  # as entered (trimmed), never normalized

    @property
    def display_name(self) -> str:
        return self.name or DEFAULT_CONTACT_LABEL


@dataclass(frozen=True)
class AddContactResult:
    contact: Contact | None = None
    error: ContactValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        return self.error.status if self.error else STATUS_CONTACT_SAVED


def validate_phone(phone: str) -> ContactValidationError | None:
    """Return the first rule a trimmed phone breaks, or None."""
    if not phone:
        return ContactValidationError.EMPTY_PHONE
    if is_blocked_number(phone):
        return ContactValidationError.BLOCKED_NUMBER
    if len(normalize_phone(phone)) < MIN_PHONE_DIGITS:
        return ContactValidationError.TOO_SHORT
    return None


def dedupe_by_phone(contacts: list[Contact]) -> list[Contact]:
    """Keep the first contact for each distinct raw phone string.

    The key is the stored text, not the canonical digits, so "555-1234567"
    and "5551234567" both survive.
    """
    seen: set[str] = set()
    kept: list[Contact] = []
    for c in contacts:
        if c.phone not in seen:
            seen.add(c.phone)
            kept.append(c)
    return kept


class ContactStore:
    """Ordered trusted contacts. Every mutation re-persists the full list."""

    def __init__(self, kv: KeyValueStore, id_factory: Callable[[], str] | None = None) -> None:
        self._kv = kv
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))
        self._contacts: list[Contact] = self._load()

    def _load(self) -> list[Contact]:
        raw = self._kv.get(STORAGE_CONTACTS)
        if not raw:
            return []
        try:
            records = _contact_list.validate_json(raw)
        except ValidationError:
            logger.warning("Stored contact list is unreadable; starting empty")
            return []
        return [Contact(id=r.id, name=r.name, phone=r.phone) for r in records]

    def _save(self) -> None:
        records = [StoredContact(id=c.id, name=c.name, phone=c.phone) for c in self._contacts]
        self._kv.set(STORAGE_CONTACTS, _contact_list.dump_json(records).decode("utf-8"))

    def add(self, name: str, phone: str) -> AddContactResult:
        """Validate and append a contact. Rejections leave storage untouched."""
        phone = (phone or "").strip()
        error = validate_phone(phone)
        if error is not None:
            logger.info("Contact rejected: %s", error.value)
            return AddContactResult(error=error)

        contact = Contact(id=self._new_id(), name=(name or "").strip(), phone=phone)
        self._contacts = dedupe_by_phone([*self._contacts, contact])
        self._save()

        # A duplicate collapses into the entry already holding that phone
        kept = next(c for c in self._contacts if c.phone == phone)
        if kept.id != contact.id:
            logger.info("Contact %s already saved as %s", phone, kept.id)
        else:
            logger.info("Contact saved: id=%s (total=%s)", kept.id, len(self._contacts))
        return AddContactResult(contact=kept)

    def remove(self, contact_id: str) -> None:
        """Drop the contact with this id; unknown ids still persist the list."""
        self._contacts = [c for c in self._contacts if c.id != contact_id]
        self._save()
        logger.info("Contact removed: id=%s (total=%s)", contact_id, len(self._contacts))

    def list(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    def recipients_csv(self) -> str:
        return ",".join(c.phone for c in self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)


class UserProfile:
    """The sender's display name, stored as a raw string."""

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv
        self._name = kv.get(STORAGE_NAME) or ""

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value or ""
        self._kv.set(STORAGE_NAME, self._name)
