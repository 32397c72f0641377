"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .artwork_handler import ArtworkHandler
from .journal_handler import JournalHandler
from .preferences_handler import PreferencesHandler
from .prompt_handler import PromptHandler

__all__ = [
    "ArtworkHandler",
    "JournalHandler",
    "PreferencesHandler",
    "PromptHandler",
]
