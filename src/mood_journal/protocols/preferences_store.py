"""User preferences store protocol."""

from typing import Protocol, runtime_checkable

from mood_journal.entities import UserPreferences


@runtime_checkable
class PreferencesStore(Protocol):
    """Protocol for per-client preference storage."""

    def load(self, client_id: str) -> UserPreferences | None:
        """Return the client's preferences, or None if never saved."""
        ...

    def save(self, preferences: UserPreferences) -> None:
        """Insert or replace the client's preferences."""
        ...
