"""
Tests for the daily prompt, entry and preferences stores.
"""

import json
from datetime import date, datetime, timedelta, timezone

import pytest
import redis

from mood_journal.entities import DailyPromptCache, JournalEntry, Mood, UserPreferences
from mood_journal.errors import StoreError
from mood_journal.repositories import (
    InMemoryDailyPromptStore,
    InMemoryEntryStore,
    RedisDailyPromptStore,
    RedisEntryStore,
    RedisPreferencesStore,
)

DAY = date(2024, 6, 1)


class KeyValueClient:
    """Minimal stand-in for the few Redis string commands the store uses."""

    def __init__(self, fail=False):
        self.data = {}
        self.ttls = {}
        self.fail = fail

    def get(self, key):
        if self.fail:
            raise redis.ConnectionError("redis down")
        return self.data.get(key)

    def set(self, key, value, ex=None):
        if self.fail:
            raise redis.ConnectionError("redis down")
        self.data[key] = value
        self.ttls[key] = ex
        return True

    def ping(self):
        if self.fail:
            raise redis.ConnectionError("redis down")
        return True


def test_redis_prompt_store_round_trip_and_key_layout():
    client = KeyValueClient()
    store = RedisDailyPromptStore(redis_client=client, key_prefix="test", ttl=60)
    cache = DailyPromptCache(day=DAY, prompts=("A", "B"), cursor=1)

    store.save("user-9", cache)

    assert json.loads(client.data["test:daily_prompts:user-9"]) == {
        "day": "2024-06-01",
        "prompts": ["A", "B"],
        "cursor": 1,
    }
    assert client.ttls["test:daily_prompts:user-9"] == 60
    assert store.load("user-9", DAY) == cache


def test_redis_prompt_store_treats_other_day_as_absent():
    client = KeyValueClient()
    store = RedisDailyPromptStore(redis_client=client, key_prefix="test")
    store.save("u", DailyPromptCache(day=DAY, prompts=("A",)))

    assert store.load("u", DAY + timedelta(days=1)) is None


def test_redis_prompt_store_discards_unreadable_value():
    client = KeyValueClient()
    client.data["test:daily_prompts:u"] = "{not json"
    store = RedisDailyPromptStore(redis_client=client, key_prefix="test")

    assert store.load("u", DAY) is None


def test_redis_prompt_store_errors():
    store = RedisDailyPromptStore(redis_client=KeyValueClient(fail=True), key_prefix="test")

    assert store.health_check() is False
    with pytest.raises(StoreError, match="redis down"):
        store.load("u", DAY)


def test_in_memory_prompt_store_expiry():
    store = InMemoryDailyPromptStore()
    store.save("u", DailyPromptCache(day=DAY, prompts=("A",)))

    assert store.load("u", DAY).prompts == ("A",)
    assert store.load("u", date(2024, 6, 2)) is None
    assert store.load("other", DAY) is None


def test_in_memory_entry_store_orders_newest_first_and_limits():
    store = InMemoryEntryStore()
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(3):
        store.add(
            JournalEntry(
                client_id="u",
                content=f"entry {i}",
                mood=Mood.NEUTRAL,
                created_at=base + timedelta(hours=i),
            )
        )

    entries = store.list_for_client("u", limit=2)

    assert [e.content for e in entries] == ["entry 2", "entry 1"]


class HashIndexClient:
    """Stand-in for the Redis hash and sorted-set commands the entry store uses."""

    def __init__(self):
        self.hashes = {}
        self.zsets = {}
        self._queued = []

    def pipeline(self):
        self._queued = []
        return self

    def execute(self):
        results = [call() for call in self._queued]
        self._queued = []
        return results

    def hset(self, key, mapping):
        self._queued.append(lambda: self.hashes.__setitem__(key, {k: str(v) for k, v in mapping.items()}))

    def zadd(self, key, mapping):
        self._queued.append(lambda: self.zsets.setdefault(key, {}).update(mapping))

    def hgetall(self, key):
        self._queued.append(lambda: dict(self.hashes.get(key, {})))

    def zrevrange(self, key, start, end):
        members = sorted(self.zsets.get(key, {}).items(), key=lambda kv: kv[1], reverse=True)
        return [member for member, _ in members][start : end + 1]


def test_redis_entry_store_round_trip():
    client = HashIndexClient()
    store = RedisEntryStore(redis_client=client, key_prefix="test")
    older = JournalEntry(
        client_id="u",
        content="rant",
        mood=Mood.ANGRY,
        is_rant=True,
        created_at=datetime(2024, 1, 1, 8, tzinfo=timezone.utc),
    )
    newer = JournalEntry(
        client_id="u",
        content="calm now",
        mood=Mood.CALM,
        created_at=datetime(2024, 1, 1, 9, tzinfo=timezone.utc),
    )

    store.add(older)
    store.add(newer)

    assert client.hashes[f"test:entry:{older.id}"]["is_rant"] == "1"
    assert store.list_for_client("u") == [newer, older]
    assert store.list_for_client("u", limit=1) == [newer]


def test_redis_preferences_store_round_trip():
    client = KeyValueClient()
    store = RedisPreferencesStore(redis_client=client, key_prefix="test")
    preferences = UserPreferences(client_id="u", daily_reminder_enabled=True)

    assert store.load("u") is None
    store.save(preferences)

    assert json.loads(client.data["test:preferences:u"]) == {
        "notification_enabled": True,
        "daily_reminder_enabled": True,
        "dark_mode": False,
    }
    assert client.ttls["test:preferences:u"] is None
    assert store.load("u") == preferences


def test_redis_preferences_store_errors():
    store = RedisPreferencesStore(redis_client=KeyValueClient(fail=True), key_prefix="test")

    with pytest.raises(StoreError):
        store.load("u")
    with pytest.raises(StoreError):
        store.save(UserPreferences(client_id="u"))
