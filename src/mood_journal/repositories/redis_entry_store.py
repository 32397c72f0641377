"""Redis implementation of EntryStore.

Entries are stored as hashes under ``<prefix>:entry:<id>``; each client
has a sorted set of entry ids scored by creation time.
"""

from datetime import datetime

import redis

from mood_journal.config import get_redis_client, settings
from mood_journal.entities import JournalEntry, Mood
from mood_journal.errors import StoreError


class RedisEntryStore:
    """Redis-backed journal entry storage."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisEntryStore":
        """Factory method to create RedisEntryStore with defaults."""
        return cls(key_prefix=key_prefix)

    def _entry_key(self, entry_id: str) -> str:
        return f"{self._prefix}:entry:{entry_id}"

    def _index_key(self, client_id: str) -> str:
        return f"{self._prefix}:entries:{client_id}"

    def add(self, entry: JournalEntry) -> str:
        """Store an entry and index it under its client.

        Returns:
            The entry id
        """
        pipe = self._client.pipeline()
        pipe.hset(
            self._entry_key(entry.id),
            mapping={
                "client_id": entry.client_id,
                "content": entry.content,
                "mood": entry.mood.value,
                "is_rant": int(entry.is_rant),
                "burn_after_writing": int(entry.burn_after_writing),
                "created_at": entry.created_at.isoformat(),
            },
        )
        pipe.zadd(self._index_key(entry.client_id), {entry.id: entry.created_at.timestamp()})
        try:
            pipe.execute()
        except redis.RedisError as e:
            raise StoreError(f"Failed to store entry: {e}") from e
        return entry.id

    def list_for_client(self, client_id: str, limit: int = 50) -> list[JournalEntry]:
        """Return a client's entries, newest first."""
        try:
            ids = self._client.zrevrange(self._index_key(client_id), 0, limit - 1)
            pipe = self._client.pipeline()
            for entry_id in ids:
                pipe.hgetall(self._entry_key(entry_id))
            rows = pipe.execute()
        except redis.RedisError as e:
            raise StoreError(f"Failed to list entries: {e}") from e

        entries = []
        for entry_id, row in zip(ids, rows):
            # Index may outlive an entry hash removed by hand
            if not row:
                continue
            entries.append(
                JournalEntry(
                    id=entry_id,
                    client_id=row["client_id"],
                    content=row["content"],
                    mood=Mood(row["mood"]),
                    is_rant=row.get("is_rant") == "1",
                    burn_after_writing=row.get("burn_after_writing") == "1",
                    created_at=datetime.fromisoformat(row["created_at"]),
                )
            )
        return entries

    def health_check(self) -> bool:
        """Check if Redis is accessible."""
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
