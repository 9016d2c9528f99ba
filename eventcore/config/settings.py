from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EVENTCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    debug: bool = False

    # Events
    default_event_capacity: int = 100

    # Notifications: "console", "logging" or "memory"
    notification_channel: str = "console"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
