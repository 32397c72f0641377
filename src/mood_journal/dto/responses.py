"""Response DTOs for API endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from mood_journal.entities import Mood, ResponseSource


class GeneratePromptResponse(BaseModel):
    """Response DTO for the prompt proxy."""

    response: str = Field(..., description="Generated text, or a fixed apology string")


class GenerateArtworkResponse(BaseModel):
    """Response DTO for the artwork proxy."""

    model_config = {"populate_by_name": True}

    image_url: str | None = Field(None, alias="imageUrl", description="First generated image URL")
    prompt: str = Field(..., description="The prompt sent to the image API")
    generation_id: str | None = Field(None, alias="generationId")


class ErrorResponse(BaseModel):
    """Body returned with HTTP 500 when an upstream call fails."""

    error: str


class DailyPromptsResponse(BaseModel):
    """Response DTO for the day's cached prompts."""

    day: date
    prompts: list[str] = Field(default_factory=list, description="Up to 3 distinct prompts")
    cursor: int = Field(0, ge=0, description="Index of the prompt the next refresh returns")


class NextPromptResponse(BaseModel):
    """Response DTO for a daily prompt refresh."""

    prompt: str
    cursor: int = Field(..., ge=0, description="Updated cursor after cycling")


class EntryResponse(BaseModel):
    """Single journal entry."""

    model_config = {"populate_by_name": True}

    id: str
    content: str
    mood: Mood
    is_rant: bool = Field(False, alias="isRant")
    burn_after_writing: bool = Field(False, alias="burnAfterWriting")
    created_at: datetime = Field(..., alias="createdAt")
    saved: bool = Field(True, description="Whether the entry was persisted")


class EntryListResponse(BaseModel):
    entries: list[EntryResponse] = Field(default_factory=list)


class RantResponse(BaseModel):
    """Response DTO for rant mode."""

    model_config = {"populate_by_name": True}

    response: str
    source: ResponseSource
    saved: bool = Field(..., description="False when burn-after-writing was requested")
    entry_id: str | None = Field(None, alias="entryId")


class MoodPromptResponse(BaseModel):
    mood: Mood
    prompt: str


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    prompt_store_healthy: bool = Field(..., alias="promptStoreHealthy")
    entry_store_healthy: bool = Field(..., alias="entryStoreHealthy")

    model_config = {"populate_by_name": True}


class PreferencesResponse(BaseModel):
    """Response DTO for user preferences."""

    model_config = {"populate_by_name": True}

    notification_enabled: bool = Field(..., alias="notificationEnabled")
    daily_reminder_enabled: bool = Field(..., alias="dailyReminderEnabled")
    dark_mode: bool = Field(..., alias="darkMode")
