"""Redis implementation of PreferencesStore.

One JSON value per client under ``<prefix>:preferences:<client_id>``,
kept without expiry.
"""

import json
import logging

import redis

from mood_journal.config import get_redis_client, settings
from mood_journal.entities import UserPreferences
from mood_journal.errors import StoreError

logger = logging.getLogger(__name__)

PREFERENCE_FIELDS = ("notification_enabled", "daily_reminder_enabled", "dark_mode")


class RedisPreferencesStore:
    """Redis-backed user preferences."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisPreferencesStore":
        """Factory method to create RedisPreferencesStore with defaults."""
        return cls(key_prefix=key_prefix)

    def _key(self, client_id: str) -> str:
        return f"{self._prefix}:preferences:{client_id}"

    def load(self, client_id: str) -> UserPreferences | None:
        try:
            raw = self._client.get(self._key(client_id))
        except redis.RedisError as e:
            raise StoreError(f"Failed to load preferences: {e}") from e

        if raw is None:
            return None

        try:
            data = json.loads(raw)
            values = {name: bool(data[name]) for name in PREFERENCE_FIELDS if name in data}
        except (ValueError, TypeError) as e:
            logger.warning("Discarding unreadable preferences for %s: %s", client_id, e)
            return None
        return UserPreferences(client_id=client_id, **values)

    def save(self, preferences: UserPreferences) -> None:
        value = json.dumps({name: getattr(preferences, name) for name in PREFERENCE_FIELDS})
        try:
            self._client.set(self._key(preferences.client_id), value)
        except redis.RedisError as e:
            raise StoreError(f"Failed to save preferences: {e}") from e
