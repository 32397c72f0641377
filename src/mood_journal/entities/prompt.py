"""Prompt request kinds and normalized prompt responses."""

from dataclasses import dataclass
from enum import Enum


class PromptKind(str, Enum):
    """What the text generator is asked to produce."""

    DAILY = "daily"
    RANT_RESPONSE = "rant-response"


class ResponseSource(str, Enum):
    """Where a prompt response text came from."""

    AI = "ai"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class PromptResponse:
    """Normalized text returned by the prompt service.

    Attributes:
        text: The text to show to the user (never empty)
        source: ``AI`` when extracted from the upstream answer, ``FALLBACK``
            when a fixed string was substituted
    """

    text: str
    source: ResponseSource = ResponseSource.AI

    @property
    def is_fallback(self) -> bool:
        return self.source is ResponseSource.FALLBACK
