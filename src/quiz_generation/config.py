import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

# Lifetime of a cached quiz result
CACHE_TTL_SECONDS = 3600


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # OpenAI
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    openai_timeout: float = float(os.getenv("OPENAI_TIMEOUT", "30"))
    quiz_max_tokens: int = int(os.getenv("QUIZ_MAX_TOKENS", "4000"))

    # Offline generation (no OpenAI calls)
    mock_ai: bool = os.getenv("MOCK_AI", "false").lower() == "true"

    # Cache
    cache_backend: str = os.getenv("QUIZ_CACHE_BACKEND", "memory")

    # Redis (only used when cache_backend == "redis")
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"QUIZ_CACHE_BACKEND must be one of ['memory', 'redis'], got {self.cache_backend}"
            )

        if self.quiz_max_tokens <= 0:
            raise ValueError("QUIZ_MAX_TOKENS must be positive")

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a known logging level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
