# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ServiceResponse"]


class ServiceResponse(BaseModel):
    """A response received from the Airship API, reduced to what classification needs.

    Attributes:
        status_code: The HTTP status code.
        body: The parsed JSON object of the response body.
        text: The raw response body text, when the transport kept it.

    Validation copies ``body``, so it is equal to, not the same object as, the mapping passed in.
    Instances are immutable but not hashable, since the body is a plain dict.
    """

    model_config = ConfigDict(frozen=True)

    __hash__ = None  # type: ignore[assignment]

    status_code: int
    body: dict[str, Any] = Field(default_factory=dict)
    text: str | None = None

    @property
    def raw_body(self) -> str:
        """The body in its natural string form: the raw text, else the parsed mapping."""
        if self.text is not None:
            return self.text
        return str(self.body)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> ServiceResponse:
        """Adapt an ``httpx.Response``.

        A body that is not a JSON object is treated as empty, so a malformed error page still
        classifies by status code.
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        return cls(status_code=response.status_code, body=data, text=response.text)
