"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from mood_journal.repositories import GeminiTextProvider, InMemoryDailyPromptStore
    from mood_journal.services import DailyPromptService, PromptService

    prompts = PromptService.create(text_generator=GeminiTextProvider.create())
    daily = DailyPromptService.create(prompt_source=prompts, store=InMemoryDailyPromptStore())
    ```
"""

from .artwork_service import ArtworkService
from .daily_prompt_service import DailyPromptService
from .journal_service import JournalService
from .preferences_service import PreferencesService
from .prompt_service import PromptService

__all__ = [
    "ArtworkService",
    "DailyPromptService",
    "JournalService",
    "PreferencesService",
    "PromptService",
]
