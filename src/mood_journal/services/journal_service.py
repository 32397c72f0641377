"""Journal service: entries, rant mode, the day image and mood writing prompts."""

import logging

from mood_journal.entities import (
    ArtworkResult,
    ClientContext,
    JournalEntry,
    Mood,
    PromptKind,
    RantReply,
    ResponseSource,
)
from mood_journal.errors import UpstreamTransportError
from mood_journal.prompts import (
    DEFAULT_WRITING_PROMPT,
    MOOD_WRITING_PROMPTS,
    RANT_EMPTY_RESPONSE,
    RANT_ERROR_RESPONSE,
)
from mood_journal.protocols import EntryStore, PromptSource

from .artwork_service import ArtworkService

logger = logging.getLogger(__name__)

# Newest entries the day image draws on
DAILY_ARTWORK_ENTRIES = 5


class JournalService:
    """Records journal entries and answers rants.

    Entries flagged burn-after-writing are never handed to the store.
    """

    def __init__(
        self,
        entry_store: EntryStore,
        prompt_source: PromptSource,
        artwork_service: ArtworkService | None = None,
    ) -> None:
        """Initialize the journal service.

        Args:
            entry_store: Where entries are persisted (required).
            prompt_source: Source of rant responses (required).
            artwork_service: Image generation for the day image.
        """
        self._entries = entry_store
        self._prompts = prompt_source
        self._artwork = artwork_service

    @classmethod
    def create(
        cls,
        entry_store: EntryStore,
        prompt_source: PromptSource,
        artwork_service: ArtworkService | None = None,
    ) -> "JournalService":
        """Factory method to create JournalService."""
        return cls(entry_store=entry_store, prompt_source=prompt_source, artwork_service=artwork_service)

    def create_entry(
        self,
        ctx: ClientContext,
        content: str,
        mood: Mood,
        burn_after_writing: bool = False,
        is_rant: bool = False,
    ) -> tuple[JournalEntry, bool]:
        """Record an entry.

        Returns:
            The entry and whether it was persisted

        Raises:
            StoreError: If persisting failed
        """
        entry = JournalEntry(
            client_id=ctx.client_id,
            content=content,
            mood=mood,
            is_rant=is_rant,
            burn_after_writing=burn_after_writing,
        )
        if burn_after_writing:
            return entry, False

        self._entries.add(entry)
        return entry, True

    def list_entries(self, ctx: ClientContext, limit: int = 50) -> list[JournalEntry]:
        """Return the client's entries, newest first."""
        return self._entries.list_for_client(ctx.client_id, limit=limit)

    async def daily_artwork(self, ctx: ClientContext) -> ArtworkResult:
        """Generate the day image from the client's most recent entries.

        Business logic:
        1. Load the newest entries (at most DAILY_ARTWORK_ENTRIES)
        2. Join their contents and take the newest entry's mood
        3. Request one image flagged as daily

        Raises:
            NoEntriesError: If the client has no stored entries
            UpstreamTransportError: If the image API call failed
        """
        if self._artwork is None:
            raise RuntimeError("JournalService was created without an artwork service")

        entries = self.list_entries(ctx, limit=DAILY_ARTWORK_ENTRIES)
        return await self._artwork.generate_daily(entries)

    async def submit_rant(
        self,
        ctx: ClientContext,
        content: str,
        burn_after_writing: bool = False,
    ) -> RantReply:
        """Record a rant (unless burned) and get a supportive reply.

        Business logic:
        1. Persist an Angry rant entry unless burn-after-writing is set
        2. Ask the prompt source for a rant response
        3. Substitute a fixed reply if the upstream call failed or was empty

        Raises:
            StoreError: If persisting failed (nothing is sent upstream then)
        """
        entry, saved = self.create_entry(
            ctx,
            content=content,
            mood=Mood.ANGRY,
            burn_after_writing=burn_after_writing,
            is_rant=True,
        )

        try:
            response = await self._prompts.generate_prompt(PromptKind.RANT_RESPONSE, content)
        except UpstreamTransportError as e:
            logger.error("Rant response failed: %s", e)
            return RantReply(
                response=RANT_ERROR_RESPONSE,
                source=ResponseSource.FALLBACK,
                saved=saved,
                entry_id=entry.id if saved else None,
            )

        text, source = response.text, response.source
        if not text.strip():
            text, source = RANT_EMPTY_RESPONSE, ResponseSource.FALLBACK

        return RantReply(
            response=text,
            source=source,
            saved=saved,
            entry_id=entry.id if saved else None,
        )

    @staticmethod
    def mood_prompt(mood: Mood | str | None) -> str:
        """Static writing prompt shown in the editor for a mood."""
        try:
            return MOOD_WRITING_PROMPTS[Mood(mood)]
        except ValueError:
            return DEFAULT_WRITING_PROMPT
