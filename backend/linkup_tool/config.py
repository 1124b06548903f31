"""Application configuration."""
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_API_URL = "https://api.linkup.so/v1/search"


class Settings(BaseSettings):
    """App settings from env."""

    linkup_api_key: str = ""
    linkup_api_url: str = DEFAULT_API_URL
    request_timeout: float | None = None  # no timeout unless configured

    # Dev server
    host: str = "127.0.0.1"
    port: int = 3000

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def with_api_key(self, api_key: str) -> "Settings":
        """Copy of these settings using a different Linkup credential."""
        return self.model_copy(update={"linkup_api_key": api_key})


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
