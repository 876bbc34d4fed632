# config.py

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    """
    Runtime settings, read from the environment and an optional .env file.

    PORT keeps the conventional unprefixed name so hosting platforms can set it.
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    static_dir: Path = Field(default=STATIC_DIR)


def get_settings() -> Settings:
    return Settings()
