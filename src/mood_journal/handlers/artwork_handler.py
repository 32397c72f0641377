"""HTTP handler for artwork generation."""

from mood_journal.dto import GenerateArtworkRequest, GenerateArtworkResponse
from mood_journal.services import ArtworkService


class ArtworkHandler:
    def __init__(self, artwork_service: ArtworkService) -> None:
        self._artwork = artwork_service

    async def generate_artwork(self, request: GenerateArtworkRequest) -> GenerateArtworkResponse:
        """Handle POST /generate-artwork requests.

        Raises:
            UpstreamTransportError: If the image API call failed
        """
        result = await self._artwork.generate(
            content=request.content,
            mood=request.mood,
            is_daily=request.is_daily,
        )
        return GenerateArtworkResponse(
            image_url=result.image_url,
            prompt=result.prompt,
            generation_id=result.generation_id,
        )
