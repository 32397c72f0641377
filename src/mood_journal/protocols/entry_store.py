"""Journal entry store protocol."""

from typing import Protocol, runtime_checkable

from mood_journal.entities import JournalEntry


@runtime_checkable
class EntryStore(Protocol):
    """Protocol for journal entry storage backends."""

    def add(self, entry: JournalEntry) -> str:
        """Store an entry.

        Returns:
            The entry id
        """
        ...

    def list_for_client(self, client_id: str, limit: int = 50) -> list[JournalEntry]:
        """Return a client's entries, newest first."""
        ...

    def health_check(self) -> bool:
        ...
