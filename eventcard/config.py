from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_ICONS_DIR = PACKAGE_DIR / "assets" / "icons"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    icons_dir: Path = Field(default=DEFAULT_ICONS_DIR, alias="EVENTCARD_ICONS_DIR")
    default_locale: str = Field(default="en", alias="EVENTCARD_LOCALE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_locale(cls, value: str | None) -> str:
        if not value:
            return "en"
        return str(value).strip().lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
