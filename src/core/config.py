from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # load all SURVICHESS_key=value pairs from the environment / .env
    """Tunables of a session. Rules of the game itself (board size, time table) are constants in the domain layer."""

    starting_lives: int = 3
    tick_seconds: float = 1.0
    transition_delay_seconds: float = 2.0
    log_level: str = "INFO"
    seed: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix="SURVICHESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
