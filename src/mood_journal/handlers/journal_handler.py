"""HTTP handlers for journal entries and rant mode."""

from mood_journal.dto import (
    CreateEntryRequest,
    EntryListResponse,
    EntryResponse,
    GenerateArtworkResponse,
    MoodPromptResponse,
    RantRequest,
    RantResponse,
)
from mood_journal.entities import ClientContext, JournalEntry, Mood
from mood_journal.services import JournalService


def _to_dto(entry: JournalEntry, saved: bool = True) -> EntryResponse:
    return EntryResponse(
        id=entry.id,
        content=entry.content,
        mood=entry.mood,
        is_rant=entry.is_rant,
        burn_after_writing=entry.burn_after_writing,
        created_at=entry.created_at,
        saved=saved,
    )


class JournalHandler:
    """HTTP handlers for journal operations."""

    def __init__(self, journal_service: JournalService) -> None:
        self._journal = journal_service

    async def create_entry(self, ctx: ClientContext, request: CreateEntryRequest) -> EntryResponse:
        """Handle POST /entries requests.

        Raises:
            StoreError: If the entry could not be persisted
        """
        entry, saved = self._journal.create_entry(
            ctx,
            content=request.content,
            mood=request.mood,
            burn_after_writing=request.burn_after_writing,
        )
        return _to_dto(entry, saved)

    async def list_entries(self, ctx: ClientContext, limit: int = 50) -> EntryListResponse:
        """Handle GET /entries requests."""
        entries = self._journal.list_entries(ctx, limit=limit)
        return EntryListResponse(entries=[_to_dto(e) for e in entries])

    async def submit_rant(self, ctx: ClientContext, request: RantRequest) -> RantResponse:
        """Handle POST /rant requests."""
        reply = await self._journal.submit_rant(
            ctx,
            content=request.content,
            burn_after_writing=request.burn_after_writing,
        )
        return RantResponse(
            response=reply.response,
            source=reply.source,
            saved=reply.saved,
            entry_id=reply.entry_id,
        )

    async def daily_artwork(self, ctx: ClientContext) -> GenerateArtworkResponse:
        """Handle POST /artwork/daily requests.

        Raises:
            NoEntriesError: If the caller has no stored entries
            UpstreamTransportError: If the image API call failed
        """
        result = await self._journal.daily_artwork(ctx)
        return GenerateArtworkResponse(
            image_url=result.image_url,
            prompt=result.prompt,
            generation_id=result.generation_id,
        )

    async def mood_prompt(self, mood: Mood) -> MoodPromptResponse:
        """Handle GET /prompts/mood/{mood} requests."""
        return MoodPromptResponse(mood=mood, prompt=self._journal.mood_prompt(mood))
