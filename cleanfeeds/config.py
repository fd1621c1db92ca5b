from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Server
    host: str = "0.0.0.0"
    port: int = 9002
    log_level: str = "WARNING"

    # Data source, fixed when the scene is assembled
    data_source: Literal["remote", "cloud", "cache"] = "remote"

    # Remote source — feed_url=None returns no feeds
    feed_url: str | None = None
    fetch_timeout: float = 10.0
    max_feeds: int = 50

    # Credentials sent by the fetch-on-load flow
    default_email: str = "wwdc@apple.com"
    default_password: str = "2017"
