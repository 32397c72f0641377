"""Artwork service for the image generation proxy."""

import logging
from typing import Any

from mood_journal.entities import ArtworkResult, JournalEntry, Mood
from mood_journal.errors import NoEntriesError
from mood_journal.prompts import ARTWORK_STYLES, DEFAULT_ARTWORK_STYLE
from mood_journal.protocols import ImageGenerator

logger = logging.getLogger(__name__)

# Content shorter than this is not worth reflecting in the image
MIN_CONTENT_LENGTH = 10
CONTENT_EXCERPT_LENGTH = 100


class ArtworkService:
    """Builds a mood-styled prompt and requests one image for it."""

    def __init__(self, image_generator: ImageGenerator) -> None:
        self._generator = image_generator

    @classmethod
    def create(cls, image_generator: ImageGenerator) -> "ArtworkService":
        """Factory method to create ArtworkService."""
        return cls(image_generator=image_generator)

    @staticmethod
    def build_prompt(content: str | None, mood: Mood | str | None) -> str:
        """Build the image prompt for an entry.

        The base phrase depends on the mood (unknown moods get a calming
        default). Content longer than 10 characters is appended as a
        100-character excerpt.
        """
        try:
            base = ARTWORK_STYLES[Mood(mood)]
        except ValueError:
            base = DEFAULT_ARTWORK_STYLE

        if content and len(content) > MIN_CONTENT_LENGTH:
            return f"{base} that reflects: {content[:CONTENT_EXCERPT_LENGTH]}"
        return base

    @staticmethod
    def parse_result(prompt: str, data: Any) -> ArtworkResult:
        """Normalize a StarryAI answer; missing fields become None."""
        if not isinstance(data, dict):
            return ArtworkResult(prompt=prompt)

        image_url = None
        output = data.get("output")
        if isinstance(output, list) and output and isinstance(output[0], dict):
            image_url = output[0].get("image_url") or None

        generation_id = data.get("id")
        return ArtworkResult(
            prompt=prompt,
            image_url=image_url,
            generation_id=str(generation_id) if generation_id is not None else None,
        )

    async def generate(
        self,
        content: str,
        mood: Mood | str | None,
        is_daily: bool = False,
    ) -> ArtworkResult:
        """Generate artwork for an entry.

        Raises:
            UpstreamTransportError: If the image API call failed
        """
        prompt = self.build_prompt(content, mood)
        logger.info("Generating artwork (daily=%s) with prompt: %s", is_daily, prompt)

        data = await self._generator.generate(prompt)
        return self.parse_result(prompt, data)

    async def generate_daily(self, entries: list[JournalEntry]) -> ArtworkResult:
        """Generate the day image from recent entries, newest first.

        The entries' contents are joined with spaces and the newest entry's
        mood picks the style.

        Raises:
            NoEntriesError: If ``entries`` is empty
            UpstreamTransportError: If the image API call failed
        """
        if not entries:
            raise NoEntriesError("No entries found. Write some journal entries first.")

        content = " ".join(entry.content for entry in entries)
        return await self.generate(content, entries[0].mood, is_daily=True)
