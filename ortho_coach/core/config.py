"""
Description:
Application settings loaded from environment variables.

All configuration is read once from the process environment (and an optional
.env file) into an immutable Settings value. Call get_settings.cache_clear()
after changing the environment in tests.

Dependencies:
- dotenv: For loading variables from a .env file.
- functools: For caching the settings instance.

Author: @kcaparas1630
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

HEURISTIC_ENGINE = "heuristic"
REMOTE_ENGINE = "remote"


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_list(value: Optional[str], default: List[str]) -> List[str]:
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-3.5-turbo"
    feedback_engine: str = HEURISTIC_ENGINE
    keyword_table_path: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    rate_limit_enabled: bool = True
    feedback_rate_limit: str = "30/minute"

    @property
    def is_test(self) -> bool:
        return self.env == "test"

    @property
    def remote_engine_requested(self) -> bool:
        return self.feedback_engine == REMOTE_ENGINE


@lru_cache()
def get_settings() -> Settings:
    """Build the Settings value from the current environment."""
    feedback_engine = os.getenv("FEEDBACK_ENGINE", HEURISTIC_ENGINE).strip().lower()
    if feedback_engine not in (HEURISTIC_ENGINE, REMOTE_ENGINE):
        raise ValueError(
            f"Unsupported FEEDBACK_ENGINE '{feedback_engine}'. "
            f"Expected '{HEURISTIC_ENGINE}' or '{REMOTE_ENGINE}'."
        )

    return Settings(
        env=os.getenv("ENV", "development"),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        feedback_engine=feedback_engine,
        keyword_table_path=os.getenv("KEYWORD_TABLE_PATH") or None,
        cors_origins=_parse_list(os.getenv("CORS_ORIGINS"), ["http://localhost:3000"]),
        rate_limit_enabled=_parse_bool(os.getenv("RATE_LIMIT_ENABLED"), True),
        feedback_rate_limit=os.getenv("FEEDBACK_RATE_LIMIT", "30/minute"),
    )
