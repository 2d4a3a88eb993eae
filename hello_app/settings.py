"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_app.errors import is_development


class Settings(BaseSettings):
    """Environment-driven configuration shared by every hosting adapter."""

    environment: str = Field(default="Production", alias="APP_ENVIRONMENT")
    log_level: str = Field(default="info", alias="LOG_LEVEL")
    https_redirect: bool = Field(default=False, alias="HTTPS_REDIRECT")
    metrics_enabled: bool = Field(default=False, alias="METRICS_ENABLED")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    dev_reload: bool = Field(default=False, alias="DEV_RELOAD")
    api_gateway_base_path: str = Field(default="/", alias="API_GATEWAY_BASE_PATH")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @property
    def dev_mode(self) -> bool:
        return is_development(self.environment)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
