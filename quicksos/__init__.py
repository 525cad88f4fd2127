"""Quick SOS: trusted contacts and one-tap distress messages."""
