"""User preferences domain entity."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class UserPreferences:
    """Per-client settings.

    A client that has never saved preferences gets these defaults, and
    they are stored on first read.
    """

    client_id: str
    notification_enabled: bool = True
    daily_reminder_enabled: bool = False
    dark_mode: bool = False

    def with_changes(self, **changes: bool | None) -> "UserPreferences":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
