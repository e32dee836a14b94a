"""Engine configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///./trailsim.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Simulation defaults
    RANDOM_SEED: Optional[int] = None


settings = Settings()
