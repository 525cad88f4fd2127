"""SOS message composition + sms: URI tests."""

from datetime import datetime

from quicksos.services.capabilities import ProbeError
from quicksos.services.location_probe import LocationFix
from quicksos.services.message_composer import compose, encode_dispatch_target, format_timestamp

FIXED_TIME = datetime(2026, 10, 19, 15, 4, 5)
UNKNOWN = LocationFix.unknown(ProbeError.DENIED)


def test_named_sender_without_location():
    msg = compose("Alex", UNKNOWN, FIXED_TIME)

    assert msg.map_link == ""
    assert msg.text.split("\n") == [
        "My name is Alex.",
        "I’m being questioned or detained and may not be able to respond right now.",
        "Please check on me to make sure I’m okay.",
        "My location is unavailable right now.",
        "Time: 10/19/2026, 03:04:05 PM.",
    ]
    assert "maps.google.com" not in msg.text


def test_anonymous_sender_with_location():
    msg = compose("", LocationFix(latitude=37.0, longitude=-122.0), FIXED_TIME)
    lines = msg.text.split("\n")

    assert msg.text.startswith("This is an SOS message.")
    assert msg.map_link == "https://maps.google.com/?q=37.000000,-122.000000"
    assert lines[3] == "My last known location is below:"
    assert lines[4] == "https://maps.google.com/?q=37.000000,-122.000000"
    assert lines[5].startswith("Time: ")
    assert "My location is unavailable right now." not in msg.text


def test_coordinates_rounded_to_six_places_in_link():
    msg = compose("", LocationFix(latitude=51.50073509, longitude=-0.12775829), FIXED_TIME)
    assert msg.map_link.endswith("?q=51.500735,-0.127758")


def test_timestamp_twelve_hour_clock():
    assert format_timestamp(datetime(2026, 1, 2, 0, 5, 9)) == "01/02/2026, 12:05:09 AM"
    assert format_timestamp(datetime(2026, 1, 2, 12, 0, 0)) == "01/02/2026, 12:00:00 PM"


def test_dispatch_target_encodes_each_part():
    uri = encode_dispatch_target("555-1234567,(555) 222-2222", "Hi there!\nI’m ok")
    assert uri == (
        "sms:555-1234567%2C(555)%20222-2222"
        "?&body=Hi%20there!%0AI%E2%80%99m%20ok"
    )


def test_dispatch_target_encodes_link():
    uri = encode_dispatch_target("5551234567", "https://maps.google.com/?q=1.000000,2.000000")
    assert uri == "sms:5551234567?&body=https%3A%2F%2Fmaps.google.com%2F%3Fq%3D1.000000%2C2.000000"
