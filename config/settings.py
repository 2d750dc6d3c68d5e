from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep the fact service location and client knobs centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    facts_api_url: str = os.getenv("FACTS_API_URL", "http://localhost:5000")
    facts_api_timeout: float = float(os.getenv("FACTS_API_TIMEOUT", "10.0"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
