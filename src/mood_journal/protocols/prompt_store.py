"""Daily prompt store protocol."""

from datetime import date
from typing import Protocol, runtime_checkable

from mood_journal.entities import DailyPromptCache


@runtime_checkable
class DailyPromptStore(Protocol):
    """Protocol for the per-client, per-day prompt cache storage.

    Implementations keep one cache per client. Reads check expiry
    explicitly: a stored cache for another day is reported as absent.
    """

    def load(self, client_id: str, day: date) -> DailyPromptCache | None:
        """Return the cache for ``day``, or None if absent or for another day."""
        ...

    def save(self, client_id: str, cache: DailyPromptCache) -> None:
        """Persist ``cache`` as the client's current daily prompts."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible."""
        ...
