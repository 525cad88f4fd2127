"""SOS policy constants."""

from __future__ import annotations

# Official emergency numbers that can never be saved as a trusted contact
BLOCKED_NUMBERS = frozenset({"911", "112", "999", "988"})

# Minimum digits a contact phone must carry
MIN_PHONE_DIGITS = 7

# Default single-shot location timeout in milliseconds
DEFAULT_LOCATION_TIMEOUT_MS = 10_000

# Key-value storage keys
STORAGE_NAME = "sos_user_name"
STORAGE_CONTACTS = "sos_contacts"

# Label shown for contacts saved without a name
DEFAULT_CONTACT_LABEL = "Contact"

# User-facing status texts
STATUS_ENTER_PHONE = "Enter a phone number."
STATUS_BLOCKED_NUMBER = "Emergency numbers like 911 cannot be added."
STATUS_TOO_SHORT = "That number looks too short."
STATUS_CONTACT_SAVED = "Contact saved."
STATUS_CONTACT_REMOVED = "Contact removed."
STATUS_NO_CONTACTS = "Add at least one contact first."
STATUS_LOCATING = "Getting location…"
STATUS_DISPATCHED = "Opening SMS app (tap Send)."
STATUS_NOTHING_TO_COPY = "Press SOS first."
STATUS_COPIED = "Message copied."
