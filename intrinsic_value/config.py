import threading
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "http://localhost:8000"


class Settings(BaseSettings):
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0  # seconds, per request
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"env_file": ".env"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()


def normalize_base_url(raw: str) -> str:
    """Strip surrounding whitespace and a single trailing slash."""
    url = raw.strip()
    if url.endswith("/"):
        url = url[:-1]
    return url


class EndpointConfig:
    """Holds the current API base URL.

    Written by explicit caller action (settings change, CLI flag) and read
    fresh by every request, so a change only affects calls issued after it.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self._lock = threading.Lock()
        self._base_url = normalize_base_url(base_url)

    def get(self) -> str:
        with self._lock:
            return self._base_url

    def set(self, base_url: str) -> None:
        with self._lock:
            self._base_url = normalize_base_url(base_url)
