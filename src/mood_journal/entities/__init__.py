"""Domain entities for internal representation.

These are plain dataclasses and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .artwork import ArtworkResult
from .client_context import ClientContext
from .daily_prompt_cache import DailyPromptCache
from .journal_entry import JournalEntry
from .mood import Mood
from .preferences import UserPreferences
from .prompt import PromptKind, PromptResponse, ResponseSource
from .rant_reply import RantReply

__all__ = [
    "ArtworkResult",
    "ClientContext",
    "DailyPromptCache",
    "JournalEntry",
    "Mood",
    "PromptKind",
    "PromptResponse",
    "RantReply",
    "ResponseSource",
    "UserPreferences",
]
