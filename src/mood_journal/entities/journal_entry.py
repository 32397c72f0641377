"""Journal entry domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .mood import Mood


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class JournalEntry:
    """A single journal entry written by a client.

    Attributes:
        client_id: The owner of the entry
        content: The entry text
        mood: The mood the entry is tagged with
        is_rant: Whether the entry was written in rant mode
        burn_after_writing: Entries with this flag are never persisted
        id: Entry identifier
        created_at: Creation time (UTC)
    """

    client_id: str
    content: str
    mood: Mood
    is_rant: bool = False
    burn_after_writing: bool = False
    id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
