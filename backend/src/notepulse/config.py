"""
App configuration - using pydantic settings for env vars
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="NotePulse API")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)  # set to True for dev

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)

    # DB settings - the app ships on an embedded sqlite file
    database_url: str = Field(default="sqlite+aiosqlite:///./notepulse.db")
    database_echo: bool = Field(default=False)  # useful for debugging

    # Redis (revoked token denylist)
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_max_connections: int = Field(default=10, description="Redis connection pool size")

    # JWT
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        min_length=1,
        description="JWT secret key",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=24 * 60, description="Access token expiration in minutes"
    )
    cookie_name: str = Field(
        default="auth_token", description="Cookie carrying the token for web clients"
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:8081"], description="CORS allowed origins"
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=True, description="Write rotating log files")
    log_dir: str = Field(default="logs", description="Directory for log files")

    # Environment
    environment: str = Field(default="development", description="Environment name")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
