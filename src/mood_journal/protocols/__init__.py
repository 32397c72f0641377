"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> in-memory, Gemini -> another LLM)
- Unit testing with mock implementations
- Clear separation of concerns
"""

from .entry_store import EntryStore
from .image_generator import ImageGenerator
from .preferences_store import PreferencesStore
from .prompt_source import PromptSource
from .prompt_store import DailyPromptStore
from .text_generator import TextGenerator

__all__ = [
    "DailyPromptStore",
    "EntryStore",
    "ImageGenerator",
    "PreferencesStore",
    "PromptSource",
    "TextGenerator",
]
