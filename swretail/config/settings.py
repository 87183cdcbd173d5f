"""Client configuration models and utilities."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SWRetail connection settings loaded from environment variables."""

    endpoint: str = Field(..., alias="SWRETAIL_ENDPOINT")
    username: str = Field(..., alias="SWRETAIL_USERNAME")
    password: str = Field(..., alias="SWRETAIL_PASSWORD")
    timeout: float = Field(default=30.0, alias="SWRETAIL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @property
    def base_url(self) -> str:
        """Endpoint with exactly one trailing slash."""
        return self.endpoint.rstrip("/") + "/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached client settings instance."""
    return Settings()
