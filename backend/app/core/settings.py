"""Application settings, overridable through environment variables or a .env file."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = Field(default="Training Enrollment API", alias="APP_NAME")
    api_version: str = "1.0.0"
    environment: str = Field(default="development", alias="APP_ENV")

    # Security
    secret_key: str = Field(default="CHANGE_ME", alias="SECRET_KEY")
    # None issues tokens without an exp claim; they end only when revoked.
    access_token_expire_minutes: Optional[int] = Field(default=None, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    database_url: str = Field(default="sqlite:///./training.db", alias="DATABASE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins_csv: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173", alias="CORS_ORIGINS"
    )

    # Default admin created at startup outside of tests
    seed_admin_email: str = Field(default="admin@example.com", alias="SEED_ADMIN_EMAIL")
    seed_admin_password: str = Field(default="Secret123!", alias="SEED_ADMIN_PASSWORD")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins_csv.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
