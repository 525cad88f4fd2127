"""SOS message text, map link and sms: dispatch URI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from urllib.parse import quote

from quicksos.core.config import settings
from quicksos.services.location_probe import LocationFix

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"

DETAINED_LINE = "I’m being questioned or detained and may not be able to respond right now."
CHECK_ON_ME_LINE = "Please check on me to make sure I’m okay."
ANONYMOUS_LINE = "This is an SOS message."
LOCATION_HEADER_LINE = "My last known location is below:"
LOCATION_UNAVAILABLE_LINE = "My location is unavailable right now."


@dataclass(frozen=True)
class ComposedMessage:
    text: str
    map_link: str


def maps_link(fix: LocationFix) -> str:
    """Google Maps link with 6-decimal coordinates, or "" for an Unknown fix."""
    if not fix.known:
        return ""
    return f"{settings.maps_base_url}{fix.latitude:.6f},{fix.longitude:.6f}"


def format_timestamp(now: datetime) -> str:
    """Render the message time with the configured strftime pattern."""
    return now.strftime(settings.message_time_format)


def compose(user_name: str, fix: LocationFix, now: datetime) -> ComposedMessage:
    link = maps_link(fix)
    lines = [
        f"My name is {user_name}." if user_name else ANONYMOUS_LINE,
        DETAINED_LINE,
        CHECK_ON_ME_LINE,
    ]
    if link:
        lines += [LOCATION_HEADER_LINE, link]
    else:
        lines.append(LOCATION_UNAVAILABLE_LINE)
    lines.append(f"Time: {format_timestamp(now)}.")
    return ComposedMessage(text="\n".join(lines), map_link=link)


def encode_dispatch_target(recipients_csv: str, text: str) -> str:
    """Build sms:<recipients>?&body=<text>, each part percent-encoded on its own."""
    recipients = quote(recipients_csv, safe=_URI_COMPONENT_SAFE)
    body = quote(text, safe=_URI_COMPONENT_SAFE)
    return f"sms:{recipients}?&body={body}"
