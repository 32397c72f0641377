import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    key_prefix: str = os.getenv("KEY_PREFIX", "mood_journal")

    # Daily prompts
    daily_prompt_count: int = int(os.getenv("DAILY_PROMPT_COUNT", "3"))
    daily_prompt_delay: float = float(os.getenv("DAILY_PROMPT_DELAY", "0.5"))
    daily_prompt_ttl: int = int(os.getenv("DAILY_PROMPT_TTL", "172800"))  # 2 days

    # Upstream generative APIs (keys are read at call time, see repositories)
    gemini_base_url: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-pro")
    starry_ai_base_url: str = os.getenv("STARRY_AI_BASE_URL", "https://api.starryai.com/api/v1")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "30.0"))

    # Prompt proxy endpoint used by PromptProxyClient
    prompt_proxy_url: str = os.getenv("PROMPT_PROXY_URL", "http://localhost:8000/generate-prompt")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.daily_prompt_count <= 3:
            raise ValueError(
                f"DAILY_PROMPT_COUNT must be between 1 and 3, got {self.daily_prompt_count}"
            )

        if self.daily_prompt_delay < 0:
            raise ValueError("DAILY_PROMPT_DELAY must not be negative")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the service."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
