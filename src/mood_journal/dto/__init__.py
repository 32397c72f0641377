"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CreateEntryRequest,
    GenerateArtworkRequest,
    GeneratePromptRequest,
    RantRequest,
    UpdatePreferencesRequest,
)
from .responses import (
    DailyPromptsResponse,
    EntryListResponse,
    EntryResponse,
    ErrorResponse,
    GenerateArtworkResponse,
    GeneratePromptResponse,
    HealthCheckResponse,
    MoodPromptResponse,
    NextPromptResponse,
    PreferencesResponse,
    RantResponse,
)

__all__ = [
    "GeneratePromptRequest",
    "GenerateArtworkRequest",
    "CreateEntryRequest",
    "RantRequest",
    "UpdatePreferencesRequest",
    "GeneratePromptResponse",
    "GenerateArtworkResponse",
    "ErrorResponse",
    "DailyPromptsResponse",
    "NextPromptResponse",
    "EntryResponse",
    "EntryListResponse",
    "RantResponse",
    "MoodPromptResponse",
    "PreferencesResponse",
    "HealthCheckResponse",
]
