"""Mood Journal - journaling backend with AI prompts, rant replies and artwork.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (TextGenerator, ImageGenerator, stores)
    - repositories: Gemini/StarryAI providers, Redis and in-memory stores
    - services: Business logic (prompts, daily rotation, artwork, journal,
      preferences)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from mood_journal.repositories import GeminiTextProvider, InMemoryDailyPromptStore
    from mood_journal.services import DailyPromptService, PromptService

    prompts = PromptService.create(text_generator=GeminiTextProvider.create())
    daily = DailyPromptService.create(prompt_source=prompts, store=InMemoryDailyPromptStore())
    ```

For HTTP API:
    ```python
    from mood_journal.api.app import app
    ```
"""

from mood_journal.config import get_redis_client, settings
from mood_journal.dto import GenerateArtworkRequest, GeneratePromptRequest
from mood_journal.entities import DailyPromptCache, Mood, PromptKind, PromptResponse
from mood_journal.errors import NoEntriesError, StoreError, UpstreamShapeError, UpstreamTransportError
from mood_journal.handlers import ArtworkHandler, JournalHandler, PreferencesHandler, PromptHandler
from mood_journal.protocols import (
    DailyPromptStore,
    EntryStore,
    ImageGenerator,
    PreferencesStore,
    PromptSource,
    TextGenerator,
)
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

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "TextGenerator",
    "ImageGenerator",
    "PromptSource",
    "DailyPromptStore",
    "EntryStore",
    "PreferencesStore",
    # Services (business logic)
    "PromptService",
    "DailyPromptService",
    "ArtworkService",
    "JournalService",
    "PreferencesService",
    # Handlers (HTTP)
    "PromptHandler",
    "ArtworkHandler",
    "JournalHandler",
    "PreferencesHandler",
    # Repositories (data access)
    "GeminiTextProvider",
    "StarryImageProvider",
    "RedisDailyPromptStore",
    "RedisEntryStore",
    "RedisPreferencesStore",
    # Entities (domain models)
    "DailyPromptCache",
    "Mood",
    "PromptKind",
    "PromptResponse",
    # Errors
    "UpstreamTransportError",
    "UpstreamShapeError",
    "StoreError",
    "NoEntriesError",
    # DTOs (API contracts)
    "GeneratePromptRequest",
    "GenerateArtworkRequest",
]
