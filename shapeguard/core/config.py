from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # Reporting
    DEFAULT_ERROR_MODE: str = "single"
    MESSAGE_VALUE_MAX_LENGTH: int = 200  # Rendered values longer than this are left out of messages
    JSON_TREE_INDENT: int = 2

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    model_config = SettingsConfigDict(
        env_prefix="SHAPEGUARD_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
