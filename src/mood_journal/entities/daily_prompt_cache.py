"""Daily prompt cache domain entity."""

from dataclasses import dataclass, field, replace
from datetime import date


@dataclass(frozen=True)
class DailyPromptCache:
    """The prompts collected for one calendar day and the rotation cursor.

    Attributes:
        day: The local calendar day the prompts belong to
        prompts: Distinct prompt strings, in collection order (at most 3)
        cursor: Index of the prompt the next ``cycle`` returns
    """

    day: date
    prompts: tuple[str, ...] = field(default_factory=tuple)
    cursor: int = 0

    MAX_PROMPTS = 3

    @property
    def is_full(self) -> bool:
        return len(self.prompts) >= self.MAX_PROMPTS

    def is_for(self, day: date) -> bool:
        """Check whether this cache is still valid on ``day``."""
        return self.day == day

    def with_prompt(self, prompt: str) -> "DailyPromptCache":
        """Return a copy with ``prompt`` appended, unless full or duplicate."""
        if self.is_full or prompt in self.prompts:
            return self
        return replace(self, prompts=self.prompts + (prompt,))

    def with_cursor(self, cursor: int) -> "DailyPromptCache":
        return replace(self, cursor=cursor)
