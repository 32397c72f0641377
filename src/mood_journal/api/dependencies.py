"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Implementations passed to ``create_app`` (tests, local runs) replace
      the Redis/Gemini/StarryAI defaults
"""

from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Header, Request

from mood_journal.config import configure_logging, settings
from mood_journal.entities import ClientContext
from mood_journal.entities.client_context import ANONYMOUS_CLIENT
from mood_journal.handlers import ArtworkHandler, JournalHandler, PreferencesHandler, PromptHandler
from mood_journal.repositories import (
    GeminiTextProvider,
    RedisDailyPromptStore,
    RedisEntryStore,
    RedisPreferencesStore,
    StarryImageProvider,
)
from mood_journal.services import (
    ArtworkService,
    DailyPromptService,
    JournalService,
    PreferencesService,
    PromptService,
)


def _from_state(request: Request, name: str) -> Any:
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_prompt_handler(request: Request) -> PromptHandler:
    """Dependency injection for PromptHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    return _from_state(request, "prompt_handler")


def get_artwork_handler(request: Request) -> ArtworkHandler:
    """Dependency injection for ArtworkHandler from app.state."""
    return _from_state(request, "artwork_handler")


def get_journal_handler(request: Request) -> JournalHandler:
    """Dependency injection for JournalHandler from app.state."""
    return _from_state(request, "journal_handler")


def get_preferences_handler(request: Request) -> PreferencesHandler:
    """Dependency injection for PreferencesHandler from app.state."""
    return _from_state(request, "preferences_handler")


def get_client_context(x_client_id: Annotated[str | None, Header()] = None) -> ClientContext:
    """Build the per-request client context from the ``x-client-id`` header."""
    return ClientContext(client_id=(x_client_id or "").strip() or ANONYMOUS_CLIENT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Providers and stores (data access) - overrides from app.state.overrides
       win over the defaults
    2. Services (business logic)
    3. Handlers (HTTP endpoints)

    Cleanup:
        Closes provider HTTP clients and removes everything from app.state
    """
    configure_logging()
    overrides: dict[str, Any] = getattr(app.state, "overrides", {})

    text_generator = overrides.get("text_generator") or GeminiTextProvider.create()
    image_generator = overrides.get("image_generator") or StarryImageProvider.create()
    prompt_store = overrides.get("prompt_store") or RedisDailyPromptStore.create()
    entry_store = overrides.get("entry_store") or RedisEntryStore.create()
    preferences_store = overrides.get("preferences_store") or RedisPreferencesStore.create()

    prompt_service = PromptService.create(text_generator=text_generator)
    daily_prompt_service = DailyPromptService.create(
        prompt_source=prompt_service,
        store=prompt_store,
        delay=overrides.get("daily_prompt_delay"),
    )
    artwork_service = ArtworkService.create(image_generator=image_generator)
    journal_service = JournalService.create(
        entry_store=entry_store,
        prompt_source=prompt_service,
        artwork_service=artwork_service,
    )
    preferences_service = PreferencesService.create(store=preferences_store)

    app.state.prompt_store = prompt_store
    app.state.entry_store = entry_store
    app.state.prompt_handler = PromptHandler(
        prompt_service=prompt_service,
        daily_prompt_service=daily_prompt_service,
    )
    app.state.artwork_handler = ArtworkHandler(artwork_service=artwork_service)
    app.state.journal_handler = JournalHandler(journal_service=journal_service)
    app.state.preferences_handler = PreferencesHandler(preferences_service=preferences_service)

    print("✓ Mood journal services initialized")
    print(f"✓ Text model: {text_generator.model_name}")
    print(f"✓ Daily prompts per day: {settings.daily_prompt_count}")
    print(f"✓ Prompt store healthy: {prompt_store.health_check()}")

    yield

    for provider in (text_generator, image_generator):
        close = getattr(provider, "close", None)
        if close is not None:
            await close()

    del app.state.preferences_handler
    del app.state.journal_handler
    del app.state.artwork_handler
    del app.state.prompt_handler
    del app.state.entry_store
    del app.state.prompt_store
    print("✓ Mood journal services shut down")


# Type aliases for cleaner dependency injection
PromptHandlerDep = Annotated[PromptHandler, Depends(get_prompt_handler)]
ArtworkHandlerDep = Annotated[ArtworkHandler, Depends(get_artwork_handler)]
JournalHandlerDep = Annotated[JournalHandler, Depends(get_journal_handler)]
PreferencesHandlerDep = Annotated[PreferencesHandler, Depends(get_preferences_handler)]
ClientContextDep = Annotated[ClientContext, Depends(get_client_context)]
