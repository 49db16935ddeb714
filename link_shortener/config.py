from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below

    DATABASE_URL has no default: starting without it raises a
    ValidationError before anything is served.
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Database
    database_url: str
    db_pool_size: int = 5
    db_pool_timeout: int = 30  # Seconds to wait for a free pooled connection
    create_tables: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("database_url")
    @classmethod
    def normalize_postgres_scheme(cls, v: str) -> str:
        # SQLAlchemy only understands the "postgresql" dialect name
        if v.startswith("postgres://"):
            return "postgresql://" + v[len("postgres://"):]
        return v


settings = Settings()
