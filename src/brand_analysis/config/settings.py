from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.errors import ConfigurationError


class AppSettings(BaseSettings):
    """應用程式環境設定。"""

    gemini_api_key: Optional[str] = Field(None, alias="GEMINI_API_KEY")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    @property
    def fallback_api_key(self) -> Optional[str]:
        """伺服器端備援金鑰，未設定時為 None。"""

        return self.gemini_api_key

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def _empty_api_key(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"未知的日誌等級：{value}")
        return name


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """載入並快取設定。"""

    try:
        return AppSettings()
    except ValidationError as error:
        raise ConfigurationError(f"環境設定無效：{error}") from error
