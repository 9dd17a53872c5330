# Copyright (c) Microsoft. All rights reserved.

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._endpoints import Endpoints, validate_server


class UrbanairshipSettings(BaseSettings):
    """Settings for the Urban Airship client library.

    Values are read from ``URBANAIRSHIP_``-prefixed environment variables or a ``.env`` file
    when not passed explicitly.

    Attributes:
        server: Host name of the Airship API server.
        log_level: Level name for the library logger.
        log_path: Optional file to write library logs to; stderr when unset.
    """

    server: str = Field(default="go.urbanairship.com", description="Host name of the Airship API server.")
    log_level: str = Field(default="INFO", description="Level name for the library logger.")
    log_path: str | None = Field(default=None, description="File to write library logs to.")

    model_config = SettingsConfigDict(
        env_prefix="URBANAIRSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("server")
    @classmethod
    def _check_server(cls, value: str) -> str:
        return validate_server(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @property
    def base_url(self) -> str:
        return f"https://{self.server}/api"

    def get_endpoints(self) -> Endpoints:
        return Endpoints.for_server(self.server)
