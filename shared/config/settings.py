from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    s3_bucket_name: str = ""
    aws_region: str = "us-east-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    port: int = Field(default=3000, ge=1, le=65535)

    # DATABASE_URL wins; otherwise the asyncpg URL is assembled from POSTGRES_*
    database_url: str | None = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"  # In Docker, this will be 'postgres'
    postgres_port: int = 5432
    postgres_db: str = "products"
    db_echo: bool = False

    log_level: str = "INFO"
    metrics_enabled: bool = True
    otlp_endpoint: str | None = None

    # degraded: keep the row flagged for reconciliation, rollback: delete it
    mirror_failure_policy: Literal["degraded", "rollback"] = "degraded"

    @field_validator("aws_access_key_id", "aws_secret_access_key", "otlp_endpoint", mode="before")
    @classmethod
    def _blank_as_unset(cls, value):
        return value or None

    @model_validator(mode="after")
    def _assemble_database_url(self):
        if not self.database_url:
            self.database_url = build_database_url(self)
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        """Read the process environment (and .env when present)."""
        return cls()


def build_database_url(settings: Settings) -> str:
    return (
        f"postgresql+asyncpg://{settings.postgres_user}:{settings.postgres_password}"
        f"@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}"
    )
