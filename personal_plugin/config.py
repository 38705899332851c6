from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR_NAME = "data"
DATA_FILE_NAME = "personal.json"


def default_data_file() -> Path:
    return Path(__file__).resolve().parent / DATA_DIR_NAME / DATA_FILE_NAME


class Settings(BaseSettings):
    """Runtime configuration for the plugin.

    Values are loaded from ``PERSONAL_*`` environment variables by default
    and may be overridden via CLI flags.
    """

    # Storage
    data_file: Path = Field(default_factory=default_data_file)

    # Routing
    trigger_words: list[str] = ["simon says", "repeat", "hey vector", "ok vector"]
    intent_tag: str = "intent_imperative_praise"

    # Privacy
    redact_pii: bool = True

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_prefix="PERSONAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
