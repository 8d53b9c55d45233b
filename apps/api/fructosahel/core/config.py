from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fructosahel.models import RuntimeMode

DEFAULT_MESSAGES_DIR = Path(__file__).resolve().parent.parent / "messages"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="development", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8002, alias="APP_PORT")
    app_runtime: RuntimeMode | None = Field(default=None, alias="APP_RUNTIME")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allowed_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ALLOWED_ORIGINS")

    messages_dir: Path = Field(default=DEFAULT_MESSAGES_DIR, alias="MESSAGES_DIR")

    route_home: str = Field(default="/", alias="ROUTE_HOME")
    route_handler: str = Field(default="/handler", alias="ROUTE_HANDLER")
    route_sign_in: str = Field(default="/handler/sign-in", alias="ROUTE_SIGN_IN")
    route_sign_up: str = Field(default="/handler/sign-up", alias="ROUTE_SIGN_UP")
    route_after_sign_in: str = Field(default="/dashboard", alias="ROUTE_AFTER_SIGN_IN")
    route_after_sign_up: str = Field(default="/dashboard", alias="ROUTE_AFTER_SIGN_UP")
    route_sign_out: str = Field(default="/", alias="ROUTE_SIGN_OUT")
    route_account_settings: str = Field(default="/handler/account-settings", alias="ROUTE_ACCOUNT_SETTINGS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
