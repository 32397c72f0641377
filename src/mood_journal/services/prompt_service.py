"""Prompt service for the daily prompt / rant response proxy.

Builds the instruction prompt, calls the text generator once and
normalizes the answer into a ``PromptResponse``.
"""

import logging
from typing import Any

from mood_journal.entities import PromptKind, PromptResponse, ResponseSource
from mood_journal.errors import UpstreamShapeError
from mood_journal.prompts import APOLOGY_RESPONSE, INSTRUCTION_TEMPLATES
from mood_journal.protocols import TextGenerator

logger = logging.getLogger(__name__)


class PromptService:
    """Stateless prompt generation over a TextGenerator.

    This service satisfies the PromptSource protocol, so it can feed a
    DailyPromptService directly in-process.

    Example:
        ```python
        from mood_journal.repositories import GeminiTextProvider
        from mood_journal.services import PromptService

        service = PromptService.create(text_generator=GeminiTextProvider.create())
        reply = await service.generate_prompt(PromptKind.RANT_RESPONSE, "Work was awful")
        print(reply.text)
        ```
    """

    def __init__(self, text_generator: TextGenerator) -> None:
        """Initialize the prompt service.

        Args:
            text_generator: The generative text backend (required).
        """
        self._generator = text_generator

    @classmethod
    def create(cls, text_generator: TextGenerator) -> "PromptService":
        """Factory method to create PromptService."""
        return cls(text_generator=text_generator)

    @staticmethod
    def build_prompt(kind: PromptKind, content: str | None = None) -> str:
        """Select the instruction template and append the user's content."""
        prompt = INSTRUCTION_TEMPLATES[kind]
        if content:
            prompt += f"\n\nUser content: {content}"
        return prompt

    @staticmethod
    def extract_text(data: Any) -> str:
        """Pull the first candidate's text out of a Gemini answer.

        Raises:
            UpstreamShapeError: If the answer does not carry a non-empty text
        """
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamShapeError(f"Unexpected API response format: {data}") from e

        if not isinstance(text, str) or not text.strip():
            raise UpstreamShapeError(f"Empty text in API response: {data}")
        return text

    async def generate_prompt(
        self,
        kind: PromptKind,
        content: str | None = None,
    ) -> PromptResponse:
        """Generate one prompt or rant response.

        Business logic:
        1. Build the instruction prompt for ``kind``
        2. Call the text generator exactly once (no retries)
        3. Extract the text, or substitute the apology string

        Args:
            kind: Daily prompt or rant response
            content: The user's text, appended when present

        Returns:
            PromptResponse with ``source=FALLBACK`` when the answer had an
            unexpected shape

        Raises:
            UpstreamTransportError: If the upstream call itself failed
        """
        data = await self._generator.generate(self.build_prompt(kind, content))

        try:
            text = self.extract_text(data)
        except UpstreamShapeError as e:
            logger.error("%s", e)
            return PromptResponse(text=APOLOGY_RESPONSE, source=ResponseSource.FALLBACK)

        return PromptResponse(text=text, source=ResponseSource.AI)

    @property
    def text_generator(self) -> TextGenerator:
        """Get the underlying text generator (for testing)."""
        return self._generator
