# Copyright (c) Microsoft. All rights reserved.

"""Tests for ServiceResponse."""

import httpx
import pytest
from pydantic import ValidationError

from urbanairship import AirshipFailure, ServiceResponse, check_response


class TestServiceResponse:
    """Test ServiceResponse model."""

    def test_defaults(self) -> None:
        response = ServiceResponse(status_code=200)
        assert response.body == {}
        assert response.text is None
        assert response.raw_body == "{}"

    def test_raw_body_prefers_text(self) -> None:
        response = ServiceResponse(status_code=400, body={"error": "x"}, text='{"error": "x"}')
        assert response.raw_body == '{"error": "x"}'

    def test_is_immutable(self) -> None:
        response = ServiceResponse(status_code=200)
        with pytest.raises(ValidationError):
            response.status_code = 500  # type: ignore[misc]

    def test_is_not_hashable(self) -> None:
        response = ServiceResponse(status_code=500, body={"error": "x"})
        with pytest.raises(TypeError):
            hash(response)

    def test_body_is_copied(self) -> None:
        """Test the body equals the mapping passed in without being the same object."""
        body = {"error": "x", "details": {"path": "audience"}}
        response = ServiceResponse(status_code=400, body=body)

        assert response.body == body
        assert response.body is not body

    def test_body_must_be_mapping(self) -> None:
        with pytest.raises(ValidationError):
            ServiceResponse(status_code=400, body=["not", "a", "mapping"])  # type: ignore[arg-type]


class TestFromHttpx:
    """Test adapting httpx responses."""

    def test_json_body(self) -> None:
        payload = {"error": "invalid push payload", "error_code": 40001, "details": {"path": "audience"}}
        response = ServiceResponse.from_httpx(httpx.Response(400, json=payload))

        assert response.status_code == 400
        assert response.body == payload
        assert response.text is not None
        assert "invalid push payload" in response.text

    @pytest.mark.parametrize(
        "content",
        [b"<html>Bad Gateway</html>", b"", b"[1, 2, 3]", b'"just a string"'],
    )
    def test_non_object_body_is_empty(self, content: bytes) -> None:
        """Test malformed or non-object bodies adapt to an empty mapping."""
        response = ServiceResponse.from_httpx(httpx.Response(502, content=content))

        assert response.status_code == 502
        assert response.body == {}
        assert response.text == content.decode("utf-8")

    def test_end_to_end_failure(self) -> None:
        """Test an adapted error response classifies with its server fields."""
        raw = httpx.Response(400, json={"error": "bad", "error_code": 40001})
        response = ServiceResponse.from_httpx(raw)

        with pytest.raises(AirshipFailure) as exc_info:
            check_response(response)

        assert exc_info.value.error_code == 40001
        assert exc_info.value.response is response
