from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Service settings loaded from environment variables (and ``.env`` if present).

    The five DB_* connection values have no defaults: the process refuses to
    start when any of them is missing or empty.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "User Records Service"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: str | None = None
    BACKEND_CORS_ORIGINS: str = ""

    # Store location and credentials
    DB_USER: str = Field(min_length=1)
    DB_PASS: str = Field(min_length=1)
    DB_HOST: str = Field(min_length=1)
    DB_PORT: int = Field(gt=0, le=65535)
    DB_NAME: str = Field(min_length=1)
    DB_DRIVER: str = "mysql+pymysql"

    # Pool limits
    DB_MAX_OPEN_CONNS: int = Field(default=25, ge=1)
    DB_MAX_IDLE_CONNS: int = Field(default=25, ge=0)
    DB_CONN_MAX_LIFETIME: int = Field(default=300, gt=0)  # seconds
    DB_CONNECT_TIMEOUT: int = Field(default=10, gt=0)  # seconds

    @model_validator(mode="after")
    def _check_pool_limits(self) -> "Settings":
        if self.DB_MAX_IDLE_CONNS > self.DB_MAX_OPEN_CONNS:
            raise ValueError("DB_MAX_IDLE_CONNS cannot exceed DB_MAX_OPEN_CONNS")
        return self

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the store; credentials are escaped by URL.create."""
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASS,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"charset": "utf8mb4"} if self.DB_DRIVER.startswith("mysql") else {},
        )

    @property
    def all_cors_origins(self) -> list[str]:
        return [
            origin.strip().rstrip("/")
            for origin in self.BACKEND_CORS_ORIGINS.split(",")
            if origin.strip()
        ]


settings = Settings()  # type: ignore[call-arg]
