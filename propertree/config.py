# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="PROPERTREE_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    META_PREFIX: str = Field(
        default="_",
        description="Marker that moves a definition key into node meta",
    )

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for the propertree package logger",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("META_PREFIX")
    def _validate_meta_prefix(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(
                f"META_PREFIX must be a single character, got {value!r}"
            )
        return value

    @field_validator("LOG_LEVEL")
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


# Create a singleton instance
settings = AppSettings()
# Store the instance in the class variable for singleton pattern
AppSettings._instance = settings
