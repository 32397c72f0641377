from datetime import date
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mood_journal.api.dependencies import (
    ArtworkHandlerDep,
    ClientContextDep,
    JournalHandlerDep,
    PreferencesHandlerDep,
    PromptHandlerDep,
    lifespan,
)
from mood_journal.api.middleware import CORS_ALLOW_HEADERS, CORS_HEADERS, ProxyPreflightMiddleware
from mood_journal.config import settings
from mood_journal.dto import (
    CreateEntryRequest,
    DailyPromptsResponse,
    EntryListResponse,
    EntryResponse,
    ErrorResponse,
    GenerateArtworkRequest,
    GenerateArtworkResponse,
    GeneratePromptRequest,
    GeneratePromptResponse,
    HealthCheckResponse,
    MoodPromptResponse,
    NextPromptResponse,
    PreferencesResponse,
    RantRequest,
    RantResponse,
    UpdatePreferencesRequest,
)
from mood_journal.entities import Mood
from mood_journal.errors import MoodJournalError, NoEntriesError

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {500: {"model": ErrorResponse}}


async def _service_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)}, headers=CORS_HEADERS)


async def _no_entries_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)}, headers=CORS_HEADERS)


def create_app(**overrides: Any) -> FastAPI:
    """Create the FastAPI application.

    Args:
        **overrides: Optional replacements for the default implementations,
            read by the lifespan: ``text_generator``, ``image_generator``,
            ``prompt_store``, ``entry_store``, ``preferences_store``,
            ``daily_prompt_delay``.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Mood Journal API",
        description="Mood journaling backend with AI prompts, rant replies and artwork",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.overrides = overrides

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=[*CORS_ALLOW_HEADERS, "x-client-id"],
    )
    # Added last so it runs first: proxy pre-flights never reach CORSMiddleware
    app.add_middleware(ProxyPreflightMiddleware)  # type: ignore[arg-type]
    app.add_exception_handler(MoodJournalError, _service_error_handler)
    app.add_exception_handler(NoEntriesError, _no_entries_handler)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Mood Journal API",
            "version": "0.1.0",
            "endpoints": {
                "generate_prompt": "/generate-prompt",
                "generate_artwork": "/generate-artwork",
                "daily_prompts": "/prompts/daily",
                "entries": "/entries",
                "rant": "/rant",
                "daily_artwork": "/artwork/daily",
                "preferences": "/preferences",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(request: Request) -> HealthCheckResponse:
        """Health check endpoint."""
        prompt_ok = request.app.state.prompt_store.health_check()
        entry_ok = request.app.state.entry_store.health_check()
        return HealthCheckResponse(
            status="healthy" if prompt_ok and entry_ok else "unhealthy",
            prompt_store_healthy=prompt_ok,
            entry_store_healthy=entry_ok,
        )

    @app.post(
        "/generate-prompt",
        response_model=GeneratePromptResponse,
        responses=ERROR_RESPONSES,
    )
    async def generate_prompt(
        request: GeneratePromptRequest,
        handler: PromptHandlerDep,
    ) -> GeneratePromptResponse:
        """Generate a daily reflection prompt or a compassionate rant response."""
        return await handler.generate_prompt(request)

    @app.post(
        "/generate-artwork",
        response_model=GenerateArtworkResponse,
        responses=ERROR_RESPONSES,
    )
    async def generate_artwork(
        request: GenerateArtworkRequest,
        handler: ArtworkHandlerDep,
    ) -> GenerateArtworkResponse:
        """Generate artwork styled by mood and reflecting the entry content."""
        return await handler.generate_artwork(request)

    @app.get("/prompts/daily", response_model=DailyPromptsResponse)
    async def daily_prompts(
        handler: PromptHandlerDep,
        ctx: ClientContextDep,
        day: date | None = None,
    ) -> DailyPromptsResponse:
        """Get today's prompts, collecting them on the first request of the day."""
        return await handler.daily_prompts(ctx, day)

    @app.post("/prompts/daily/next", response_model=NextPromptResponse)
    async def next_daily_prompt(
        handler: PromptHandlerDep,
        ctx: ClientContextDep,
        day: date | None = None,
    ) -> NextPromptResponse:
        """Rotate to the next of today's prompts."""
        return await handler.next_prompt(ctx, day)

    @app.get("/prompts/mood/{mood}", response_model=MoodPromptResponse)
    async def mood_prompt(mood: Mood, handler: JournalHandlerDep) -> MoodPromptResponse:
        """Get the static writing prompt for a mood."""
        return await handler.mood_prompt(mood)

    @app.post("/entries", response_model=EntryResponse, responses=ERROR_RESPONSES)
    async def create_entry(
        request: CreateEntryRequest,
        handler: JournalHandlerDep,
        ctx: ClientContextDep,
    ) -> EntryResponse:
        """Record a journal entry (not persisted when burn-after-writing is set)."""
        return await handler.create_entry(ctx, request)

    @app.get("/entries", response_model=EntryListResponse)
    async def list_entries(
        handler: JournalHandlerDep,
        ctx: ClientContextDep,
        limit: int = Query(50, ge=1, le=200),
    ) -> EntryListResponse:
        """List the caller's entries, newest first."""
        return await handler.list_entries(ctx, limit)

    @app.post("/rant", response_model=RantResponse, responses=ERROR_RESPONSES)
    async def submit_rant(
        request: RantRequest,
        handler: JournalHandlerDep,
        ctx: ClientContextDep,
    ) -> RantResponse:
        """Vent in rant mode and get a supportive reply."""
        return await handler.submit_rant(ctx, request)

    @app.post(
        "/artwork/daily",
        response_model=GenerateArtworkResponse,
        responses={404: {"model": ErrorResponse}, **ERROR_RESPONSES},
    )
    async def daily_artwork(
        handler: JournalHandlerDep,
        ctx: ClientContextDep,
    ) -> GenerateArtworkResponse:
        """Generate the day image from the caller's five newest entries."""
        return await handler.daily_artwork(ctx)

    @app.get("/preferences", response_model=PreferencesResponse)
    async def get_preferences(
        handler: PreferencesHandlerDep,
        ctx: ClientContextDep,
    ) -> PreferencesResponse:
        """Get the caller's preferences, storing defaults on first read."""
        return await handler.get_preferences(ctx)

    @app.put("/preferences", response_model=PreferencesResponse)
    async def update_preferences(
        request: UpdatePreferencesRequest,
        handler: PreferencesHandlerDep,
        ctx: ClientContextDep,
    ) -> PreferencesResponse:
        """Update some or all of the caller's preferences."""
        return await handler.update_preferences(ctx, request)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mood_journal.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
