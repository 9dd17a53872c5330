# Copyright (c) Microsoft. All rights reserved.
"""Classification of Airship API responses into success or a typed failure."""

from __future__ import annotations

from typing import Any, Protocol

from ._logging import get_logger
from ._response import ServiceResponse
from .exceptions import AirshipFailure, Forbidden, Unauthorized

__all__ = ["ErrorLogger", "check_code", "check_response", "format_failure", "is_success"]

logger = get_logger("urbanairship.common")


class ErrorLogger(Protocol):
    """Anything that accepts an error-level message, such as a ``logging.Logger``."""

    def error(self, msg: str, /, *args: Any, **kwargs: Any) -> Any: ...


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def format_failure(status_code: int, failure: AirshipFailure) -> str:
    """Render the log line for a failed request.

    Absent fields render as empty strings.
    """
    raw_body = failure.response.raw_body if failure.response is not None else ""
    error_code = "" if failure.error_code is None else failure.error_code
    error = "" if failure.error is None else failure.error
    return f"Request failed with status {status_code}: '{error_code} {error}': {raw_body}"


def check_code(status_code: int, response: ServiceResponse, *, log: ErrorLogger | None = None) -> None:
    """Parse a response code and raise the matching failure.

    Args:
        status_code: The HTTP status code of the response.
        response: The response to build an ``AirshipFailure`` from.
        log: Receives the error line for an ``AirshipFailure``. Defaults to the
            ``urbanairship.common`` logger.

    Raises:
        Unauthorized: On 401.
        Forbidden: On 403.
        AirshipFailure: On any other status outside 200-299, after logging it once.
    """
    if status_code == 401:
        raise Unauthorized()
    if status_code == 403:
        raise Forbidden()
    if not is_success(status_code):
        failure = AirshipFailure.from_response(response)
        (log if log is not None else logger).error(format_failure(status_code, failure))
        raise failure


def check_response(response: ServiceResponse, *, log: ErrorLogger | None = None) -> None:
    """Classify a response by its own status code."""
    check_code(response.status_code, response, log=log)
