# Copyright (c) Microsoft. All rights reserved.

import importlib.metadata

from ._common import ErrorLogger, check_code, check_response, format_failure, is_success
from ._endpoints import (
    APID_FEEDBACK_URL,
    APID_URL,
    BASE_URL,
    CHANNEL_URL,
    DEVICE_PIN_URL,
    DEVICE_TOKEN_URL,
    DT_FEEDBACK_URL,
    PUSH_URL,
    SCHEDULES_URL,
    SEGMENTS_URL,
    SERVER,
    TAGS_URL,
    Endpoints,
)
from ._logging import get_logger, setup_logging
from ._response import ServiceResponse
from ._settings import UrbanairshipSettings
from .exceptions import (
    FORBIDDEN_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    AirshipFailure,
    ConfigurationError,
    Forbidden,
    ServiceResponseException,
    Unauthorized,
    UrbanairshipException,
)

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "APID_FEEDBACK_URL",
    "APID_URL",
    "BASE_URL",
    "CHANNEL_URL",
    "DEVICE_PIN_URL",
    "DEVICE_TOKEN_URL",
    "DT_FEEDBACK_URL",
    "FORBIDDEN_MESSAGE",
    "PUSH_URL",
    "SCHEDULES_URL",
    "SEGMENTS_URL",
    "SERVER",
    "TAGS_URL",
    "UNAUTHORIZED_MESSAGE",
    "AirshipFailure",
    "ConfigurationError",
    "Endpoints",
    "ErrorLogger",
    "Forbidden",
    "ServiceResponse",
    "ServiceResponseException",
    "Unauthorized",
    "UrbanairshipException",
    "UrbanairshipSettings",
    "check_code",
    "check_response",
    "format_failure",
    "get_logger",
    "is_success",
    "setup_logging",
]
