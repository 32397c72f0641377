"""Artwork generation result entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArtworkResult:
    """Normalized result of one image generation call.

    Attributes:
        prompt: The prompt that was sent to the image API
        image_url: URL of the first generated image, if the API returned one
        generation_id: Upstream generation identifier, if any
    """

    prompt: str
    image_url: str | None = None
    generation_id: str | None = None
