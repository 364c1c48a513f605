import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

BACKENDS = ("redis", "memory")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Store
    store_backend: str = os.getenv("STORE_BACKEND", "redis")
    store_key_prefix: str = os.getenv("STORE_KEY_PREFIX", "product")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory")
    cache_namespace: str = os.getenv("CACHE_NAMESPACE", "cache")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "0"))  # 0 = entries never expire

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in BACKENDS:
            raise ValueError(f"STORE_BACKEND must be one of {list(BACKENDS)}, got {self.store_backend!r}")

        if self.cache_backend not in BACKENDS:
            raise ValueError(f"CACHE_BACKEND must be one of {list(BACKENDS)}, got {self.cache_backend!r}")

        if self.cache_ttl < 0:
            raise ValueError("CACHE_TTL must be zero (no expiry) or a positive number of seconds")


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
