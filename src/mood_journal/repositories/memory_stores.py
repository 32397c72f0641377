"""In-process implementations of the storage protocols.

Useful for local development without Redis and for tests. State lives
in plain dicts and is lost when the process exits.
"""

from datetime import date

from mood_journal.entities import DailyPromptCache, JournalEntry, UserPreferences


class InMemoryDailyPromptStore:
    """Dict-backed DailyPromptStore."""

    def __init__(self) -> None:
        self._caches: dict[str, DailyPromptCache] = {}

    def load(self, client_id: str, day: date) -> DailyPromptCache | None:
        cache = self._caches.get(client_id)
        if cache is None or not cache.is_for(day):
            return None
        return cache

    def save(self, client_id: str, cache: DailyPromptCache) -> None:
        self._caches[client_id] = cache

    def health_check(self) -> bool:
        return True


class InMemoryEntryStore:
    """Dict-backed EntryStore."""

    def __init__(self) -> None:
        self._entries: dict[str, list[JournalEntry]] = {}

    def add(self, entry: JournalEntry) -> str:
        self._entries.setdefault(entry.client_id, []).append(entry)
        return entry.id

    def list_for_client(self, client_id: str, limit: int = 50) -> list[JournalEntry]:
        entries = sorted(
            self._entries.get(client_id, []),
            key=lambda e: e.created_at,
            reverse=True,
        )
        return entries[:limit]

    def health_check(self) -> bool:
        return True


class InMemoryPreferencesStore:
    """Dict-backed PreferencesStore."""

    def __init__(self) -> None:
        self._preferences: dict[str, UserPreferences] = {}

    def load(self, client_id: str) -> UserPreferences | None:
        return self._preferences.get(client_id)

    def save(self, preferences: UserPreferences) -> None:
        self._preferences[preferences.client_id] = preferences
