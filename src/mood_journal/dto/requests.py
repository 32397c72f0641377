"""Request DTOs for API endpoints.

Field names on the wire are camelCase, matching what the web client sends.
"""

from pydantic import BaseModel, Field, model_validator

from mood_journal.entities import Mood, PromptKind


class GeneratePromptRequest(BaseModel):
    """Request DTO for the prompt proxy."""

    model_config = {"populate_by_name": True}

    prompt_type: PromptKind = Field(
        ...,
        alias="promptType",
        description="'daily' for a reflection prompt, 'rant-response' for a supportive reply",
    )
    content: str | None = Field(None, description="The user's text, appended to the instruction")

    @model_validator(mode="after")
    def _require_rant_content(self) -> "GeneratePromptRequest":
        if self.prompt_type is PromptKind.RANT_RESPONSE and not (self.content or "").strip():
            raise ValueError("content is required for rant-response prompts")
        return self


class GenerateArtworkRequest(BaseModel):
    """Request DTO for the artwork proxy."""

    model_config = {"populate_by_name": True}

    content: str = Field("", description="Entry text the artwork should reflect")
    mood: Mood | None = Field(None, description="Mood label selecting the base style")
    is_daily: bool = Field(False, alias="isDaily", description="Whether this is the daily artwork")


class CreateEntryRequest(BaseModel):
    """Request DTO for recording a journal entry."""

    model_config = {"populate_by_name": True}

    content: str = Field(..., description="The entry text", min_length=1)
    mood: Mood = Field(Mood.NEUTRAL, description="Mood tag")
    burn_after_writing: bool = Field(
        False,
        alias="burnAfterWriting",
        description="If true the entry is never persisted",
    )


class RantRequest(BaseModel):
    """Request DTO for rant mode."""

    model_config = {"populate_by_name": True}

    content: str = Field(..., description="The rant", min_length=1)
    burn_after_writing: bool = Field(False, alias="burnAfterWriting")


class UpdatePreferencesRequest(BaseModel):
    """Request DTO for a partial preferences update; omitted fields are kept."""

    model_config = {"populate_by_name": True}

    notification_enabled: bool | None = Field(None, alias="notificationEnabled")
    daily_reminder_enabled: bool | None = Field(None, alias="dailyReminderEnabled")
    dark_mode: bool | None = Field(None, alias="darkMode")
