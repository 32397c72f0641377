"""Redis implementation of DailyPromptStore.

Each client owns a single key holding the JSON-encoded cache for the
day it was written. The key carries a TTL for housekeeping only; expiry
is decided on read by comparing the stored day with the requested one.
"""

import json
import logging
from datetime import date

import redis

from mood_journal.config import get_redis_client, settings
from mood_journal.entities import DailyPromptCache
from mood_journal.errors import StoreError

logger = logging.getLogger(__name__)


class RedisDailyPromptStore:
    """Redis-backed daily prompt cache.

    This class satisfies the DailyPromptStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis daily prompt store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for all keys. Defaults to settings.
            ttl: Housekeeping TTL for cache keys in seconds.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.key_prefix
        self._ttl = ttl or settings.daily_prompt_ttl

    @classmethod
    def create(
        cls,
        key_prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisDailyPromptStore":
        """Factory method to create RedisDailyPromptStore with defaults."""
        return cls(key_prefix=key_prefix, ttl=ttl)

    def _key(self, client_id: str) -> str:
        return f"{self._prefix}:daily_prompts:{client_id}"

    def load(self, client_id: str, day: date) -> DailyPromptCache | None:
        """Return the client's cache for ``day``.

        Returns:
            The cache, or None when nothing is stored, the stored value is
            unreadable, or it belongs to another day
        """
        try:
            raw = self._client.get(self._key(client_id))
        except redis.RedisError as e:
            raise StoreError(f"Failed to load daily prompts: {e}") from e

        if raw is None:
            return None

        try:
            data = json.loads(raw)
            cache = DailyPromptCache(
                day=date.fromisoformat(data["day"]),
                prompts=tuple(data.get("prompts", [])),
                cursor=int(data.get("cursor", 0)),
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding unreadable daily prompt cache for %s: %s", client_id, e)
            return None

        if not cache.is_for(day):
            return None
        return cache

    def save(self, client_id: str, cache: DailyPromptCache) -> None:
        """Persist the client's cache, replacing any previous day."""
        value = json.dumps(
            {
                "day": cache.day.isoformat(),
                "prompts": list(cache.prompts),
                "cursor": cache.cursor,
            }
        )
        try:
            self._client.set(self._key(client_id), value, ex=self._ttl)
        except redis.RedisError as e:
            raise StoreError(f"Failed to save daily prompts: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible."""
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
