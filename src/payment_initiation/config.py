"""Configuration management.

Environment-based settings via pydantic-settings. Every variable is
prefixed with PAYMENT_INITIATION_, e.g. PAYMENT_INITIATION_LOG_LEVEL=DEBUG.
"""

from __future__ import annotations

import logging
from datetime import UTC, tzinfo
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentInitiationSettings(BaseSettings):
    """Payment initiation service configuration."""

    model_config = SettingsConfigDict(env_prefix="PAYMENT_INITIATION_")

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Business rules configuration
    # Calendar in which "execution date not before today" is evaluated
    business_timezone: str = "UTC"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("business_timezone")
    @classmethod
    def _validate_business_timezone(cls, value: str) -> str:
        name = value.strip()
        if name.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA timezone: {value}") from e
        return name

    def business_tzinfo(self) -> tzinfo:
        if self.business_timezone == "UTC":
            return UTC
        return ZoneInfo(self.business_timezone)


@lru_cache(maxsize=1)
def get_settings() -> PaymentInitiationSettings:
    """Settings loaded once from the environment."""
    return PaymentInitiationSettings()
