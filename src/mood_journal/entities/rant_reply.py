"""Rant mode reply entity."""

from dataclasses import dataclass

from .prompt import ResponseSource


@dataclass(frozen=True)
class RantReply:
    """Outcome of submitting a rant.

    Attributes:
        response: The supportive reply to show
        source: Whether the reply came from the AI or a fixed fallback
        saved: Whether the rant was persisted as a journal entry
        entry_id: Id of the stored entry, if saved
    """

    response: str
    source: ResponseSource
    saved: bool
    entry_id: str | None = None
