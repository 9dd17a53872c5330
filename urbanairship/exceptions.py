# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._response import ServiceResponse

__all__ = [
    "FORBIDDEN_MESSAGE",
    "UNAUTHORIZED_MESSAGE",
    "AirshipFailure",
    "ConfigurationError",
    "Forbidden",
    "ServiceResponseException",
    "Unauthorized",
    "UrbanairshipException",
]

UNAUTHORIZED_MESSAGE = (
    "Client is not authorized to make this request. The authorization credentials are incorrect or missing."
)
FORBIDDEN_MESSAGE = (
    "Client is not forbidden from making this request. "
    "The application does not have the proper entitlement to access this feature."
)


class UrbanairshipException(Exception):
    """Base exception for the Urban Airship client library."""

    def __init__(self, message: str = "", inner_exception: Exception | None = None, *args: Any):
        """Create an UrbanairshipException. Construction never logs."""
        if inner_exception:
            super().__init__(message, inner_exception, *args)
        else:
            super().__init__(message, *args)
        self.message = message
        self.inner_exception = inner_exception

    def __str__(self) -> str:
        return self.message


class ConfigurationError(UrbanairshipException, ValueError):
    """The library configuration is invalid."""


# region Response Exceptions


class ServiceResponseException(UrbanairshipException):
    """Base class for all failures derived from an Airship API response."""


class Unauthorized(ServiceResponseException):
    """Raised when the server answers 401."""

    def __init__(self, message: str = UNAUTHORIZED_MESSAGE, *args: Any):
        super().__init__(message, None, *args)


class Forbidden(ServiceResponseException):
    """Raised when the server answers 403."""

    def __init__(self, message: str = FORBIDDEN_MESSAGE, *args: Any):
        super().__init__(message, None, *args)


class AirshipFailure(ServiceResponseException):
    """Raised when the server answers with any other non-2xx status.

    Attributes:
        error: The ``error`` string from the response body, if any.
        error_code: The ``error_code`` from the response body, if any.
        details: The structured ``details`` value from the response body, if any.
        response: The response the failure was built from.
    """

    def __init__(
        self,
        error: str | None = None,
        error_code: Any = None,
        details: Any = None,
        response: ServiceResponse | None = None,
    ):
        self.error = error
        self.error_code = error_code
        self.details = details
        self.response = response
        super().__init__(f"{_blank(error_code)} {_blank(error)}")

    @classmethod
    def from_response(cls, response: ServiceResponse) -> AirshipFailure:
        """Build a failure from a response body.

        Missing fields are left as ``None``; nothing is logged here.
        """
        payload = response.body
        return cls(
            error=payload.get("error"),
            error_code=payload.get("error_code"),
            details=payload.get("details"),
            response=response,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error={self.error!r}, error_code={self.error_code!r}, details={self.details!r})"
        )


# endregion


def _blank(value: Any) -> str:
    return "" if value is None else str(value)
