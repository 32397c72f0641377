"""HTTP handlers for user preferences."""

from mood_journal.dto import PreferencesResponse, UpdatePreferencesRequest
from mood_journal.entities import ClientContext, UserPreferences
from mood_journal.services import PreferencesService


def _to_dto(preferences: UserPreferences) -> PreferencesResponse:
    return PreferencesResponse(
        notification_enabled=preferences.notification_enabled,
        daily_reminder_enabled=preferences.daily_reminder_enabled,
        dark_mode=preferences.dark_mode,
    )


class PreferencesHandler:
    def __init__(self, preferences_service: PreferencesService) -> None:
        self._preferences = preferences_service

    async def get_preferences(self, ctx: ClientContext) -> PreferencesResponse:
        """Handle GET /preferences requests."""
        return _to_dto(self._preferences.get(ctx))

    async def update_preferences(
        self,
        ctx: ClientContext,
        request: UpdatePreferencesRequest,
    ) -> PreferencesResponse:
        """Handle PUT /preferences requests."""
        preferences = self._preferences.update(
            ctx,
            notification_enabled=request.notification_enabled,
            daily_reminder_enabled=request.daily_reminder_enabled,
            dark_mode=request.dark_mode,
        )
        return _to_dto(preferences)
