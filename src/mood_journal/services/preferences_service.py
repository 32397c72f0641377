"""User preferences service."""

import logging

from mood_journal.entities import ClientContext, UserPreferences
from mood_journal.protocols import PreferencesStore

logger = logging.getLogger(__name__)


class PreferencesService:
    """Reads and updates per-client preferences.

    A first read stores the defaults so later reads and partial updates
    always find a record.
    """

    def __init__(self, store: PreferencesStore) -> None:
        self._store = store

    @classmethod
    def create(cls, store: PreferencesStore) -> "PreferencesService":
        """Factory method to create PreferencesService."""
        return cls(store=store)

    def get(self, ctx: ClientContext) -> UserPreferences:
        """Return the client's preferences, storing defaults on first read.

        Raises:
            StoreError: If the store could not be read or written
        """
        preferences = self._store.load(ctx.client_id)
        if preferences is None:
            preferences = UserPreferences(client_id=ctx.client_id)
            self._store.save(preferences)
            logger.info("Stored default preferences for %s", ctx.client_id)
        return preferences

    def update(
        self,
        ctx: ClientContext,
        notification_enabled: bool | None = None,
        daily_reminder_enabled: bool | None = None,
        dark_mode: bool | None = None,
    ) -> UserPreferences:
        """Apply the given changes and upsert the result.

        Fields left as None keep their stored (or default) value.
        """
        preferences = self.get(ctx).with_changes(
            notification_enabled=notification_enabled,
            daily_reminder_enabled=daily_reminder_enabled,
            dark_mode=dark_mode,
        )
        self._store.save(preferences)
        return preferences
