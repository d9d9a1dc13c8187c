"""Configuration management."""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings.

    Affinity thresholds, group size limits and the category tables are
    fixed contract values and live in ``constants``, not here.
    """

    # Database
    database_url: str = Field(
        default="sqlite:///./hive.db",
        description="SQLAlchemy database URL for the member/event directory"
    )

    # Layout defaults (used when the caller does not send a viewport)
    default_viewport_width: float = Field(default=390.0, gt=0)
    default_viewport_height: float = Field(default=844.0, gt=0)

    # Recommendations
    recommendation_limit: int = Field(default=5, ge=0)

    # Largest population handed to the engine in one call
    max_population: int = Field(default=500, ge=1)

    log_level: str = Field(default="INFO")

    # Config versioning
    config_version: str = Field(default="1.0.0")

    class Config:
        env_prefix = "HIVE_"
        env_file = ".env"


def get_settings() -> Settings:
    """Get settings - environment variables take priority over .env."""
    return Settings()


settings = get_settings()
