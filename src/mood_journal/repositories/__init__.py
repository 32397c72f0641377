"""Repository layer for data access.

This layer abstracts external dependencies (Redis, generative AI APIs)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis -> in-memory, Gemini -> another LLM)
- Unit testing with mock implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from .gemini_text_provider import GeminiTextProvider
from .memory_stores import InMemoryDailyPromptStore, InMemoryEntryStore, InMemoryPreferencesStore
from .prompt_proxy_client import PromptProxyClient
from .redis_entry_store import RedisEntryStore
from .redis_preferences_store import RedisPreferencesStore
from .redis_prompt_store import RedisDailyPromptStore
from .starry_image_provider import StarryImageProvider

__all__ = [
    "GeminiTextProvider",
    "StarryImageProvider",
    "PromptProxyClient",
    "RedisDailyPromptStore",
    "RedisEntryStore",
    "RedisPreferencesStore",
    "InMemoryDailyPromptStore",
    "InMemoryEntryStore",
    "InMemoryPreferencesStore",
]
