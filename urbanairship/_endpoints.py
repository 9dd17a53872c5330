# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError

__all__ = [
    "APID_FEEDBACK_URL",
    "APID_URL",
    "BASE_URL",
    "CHANNEL_URL",
    "DEVICE_PIN_URL",
    "DEVICE_TOKEN_URL",
    "DT_FEEDBACK_URL",
    "PUSH_URL",
    "SCHEDULES_URL",
    "SEGMENTS_URL",
    "SERVER",
    "TAGS_URL",
    "Endpoints",
]

SERVER = "go.urbanairship.com"
BASE_URL = "https://go.urbanairship.com/api"
CHANNEL_URL = BASE_URL + "/channels/"
DEVICE_TOKEN_URL = BASE_URL + "/device_tokens/"
APID_URL = BASE_URL + "/apids/"
DEVICE_PIN_URL = BASE_URL + "/device_pins/"
PUSH_URL = BASE_URL + "/push/"
DT_FEEDBACK_URL = BASE_URL + "/device_tokens/feedback/"
APID_FEEDBACK_URL = BASE_URL + "/apids/feedback/"
SCHEDULES_URL = BASE_URL + "/schedules/"
TAGS_URL = BASE_URL + "/tags/"
SEGMENTS_URL = BASE_URL + "/segments/"

_PATHS: dict[str, str] = {
    "channel_url": "/channels/",
    "device_token_url": "/device_tokens/",
    "apid_url": "/apids/",
    "device_pin_url": "/device_pins/",
    "push_url": "/push/",
    "dt_feedback_url": "/device_tokens/feedback/",
    "apid_feedback_url": "/apids/feedback/",
    "schedules_url": "/schedules/",
    "tags_url": "/tags/",
    "segments_url": "/segments/",
}


def validate_server(server: str) -> str:
    """Return ``server`` stripped, or raise if it is not a bare host name."""
    host = server.strip()
    if not host:
        raise ConfigurationError("Server must not be empty.")
    if "://" in host or "/" in host or any(c.isspace() for c in host):
        raise ConfigurationError(f"Server must be a bare host name, got {server!r}.")
    return host


class Endpoints(BaseModel):
    """The absolute API URLs for one Airship server.

    ``Endpoints()`` matches the module-level constants.
    """

    model_config = ConfigDict(frozen=True)

    server: str = SERVER
    base_url: str = BASE_URL
    channel_url: str = CHANNEL_URL
    device_token_url: str = DEVICE_TOKEN_URL
    apid_url: str = APID_URL
    device_pin_url: str = DEVICE_PIN_URL
    push_url: str = PUSH_URL
    dt_feedback_url: str = DT_FEEDBACK_URL
    apid_feedback_url: str = APID_FEEDBACK_URL
    schedules_url: str = SCHEDULES_URL
    tags_url: str = TAGS_URL
    segments_url: str = SEGMENTS_URL

    @classmethod
    def for_server(cls, server: str) -> Endpoints:
        host = validate_server(server)
        base_url = f"https://{host}/api"
        return cls(
            server=host,
            base_url=base_url,
            **{name: base_url + path for name, path in _PATHS.items()},
        )
