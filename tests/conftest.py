# Copyright (c) Microsoft. All rights reserved.
"""Shared pytest fixtures for urbanairship tests."""

import logging

import pytest

from urbanairship import ServiceResponse


@pytest.fixture
def service_response_factory():
    """Factory fixture to create ServiceResponse objects with test data."""

    def _create_response(status_code: int = 200, body: dict | None = None, text: str | None = None) -> ServiceResponse:
        return ServiceResponse(status_code=status_code, body=body or {}, text=text)

    return _create_response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep settings tests independent from the host environment and any .env file."""
    for name in ("URBANAIRSHIP_SERVER", "URBANAIRSHIP_LOG_LEVEL", "URBANAIRSHIP_LOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def library_logger():
    """Yield the library logger and restore its handlers and level afterwards."""
    logger = logging.getLogger("urbanairship")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
