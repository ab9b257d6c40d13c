from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WORDCOUNT_", env_file=".env", extra="ignore"
    )

    passage_path: str = "passage.txt"
    encoding: str = "utf-8"
    top_k: int = Field(default=10, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
