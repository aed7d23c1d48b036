"""Health-check payload for the growth API."""

PING_MESSAGE = "pong"


def get_ping_message() -> str:
    return PING_MESSAGE
