# shopassist/core/config.py
from functools import lru_cache
from typing import Literal
import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

ENV_FILES: dict[str, str] = {
    "development": ".env.development",
    "production": ".env.production",
}


class Settings(BaseSettings):
    """
    Runtime configuration. Upper-case keys come from the environment/.env file
    as-is; lower-case keys are tunables with defaults that rarely need overriding.
    """

    APP_ENV: EnvName = "development"
    APP_NAME: str = "ShopAssist"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Empty means "no cache": the catalog is read from the seed on every start
    REDIS_URL: str = ""

    catalog_cache_key: str = "catalog:products"
    catalog_cache_ttl: int = Field(default=24 * 3600, gt=0)  # seconds

    top_rated_limit: int = Field(default=10, ge=1)
    best_sellers_limit: int = Field(default=5, ge=1)
    chat_result_limit: int = Field(default=5, ge=1)
    chat_max_sessions: int = Field(default=1000, ge=1)  # LRU cap on live conversations

    api_prefix: str = "/api"

    # env file is picked per APP_ENV in get_settings()
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)


@lru_cache
def get_settings() -> Settings:
    """Settings for the current APP_ENV, built once and shared (safe to use with Depends)."""
    app_env = os.getenv("APP_ENV", "development")
    return Settings(_env_file=ENV_FILES.get(app_env, ENV_FILES["production"]), _env_file_encoding="utf-8")
