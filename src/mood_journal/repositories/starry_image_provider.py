"""StarryAI-based image generation provider.

Each call creates one 512x512 ``digital-art`` generation. The API key is
read from ``STARRY_AI_API_KEY`` on every call unless passed explicitly.
"""

import logging
import os
from typing import Any

import httpx

from mood_journal.config import settings
from mood_journal.errors import UpstreamTransportError

logger = logging.getLogger(__name__)


class StarryImageProvider:
    """StarryAI implementation of the ImageGenerator protocol."""

    API_KEY_ENV = "STARRY_AI_API_KEY"

    IMAGE_PARAMS = {
        "height": 512,
        "width": 512,
        "cfg_scale": 7,
        "style_preset": "digital-art",
    }

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the StarryAI provider.

        Args:
            base_url: API base URL. Defaults to settings.starry_ai_base_url.
            api_key: API key. If None, read from the environment at call time.
            timeout: Request timeout in seconds.
            client: Preconfigured async client (mainly for tests).
        """
        self._base_url = (base_url or settings.starry_ai_base_url).rstrip("/")
        self._api_key = api_key
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @classmethod
    def create(cls, base_url: str | None = None) -> "StarryImageProvider":
        """Factory method to create StarryImageProvider with defaults."""
        return cls(base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/generation"

    def _current_api_key(self) -> str:
        if self._api_key is not None:
            return self._api_key
        return os.getenv(self.API_KEY_ENV, "")

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Request one image generation.

        Raises:
            UpstreamTransportError: If the request fails, the status is not
                2xx, or the body is not JSON
        """
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self._current_api_key(),
        }
        payload = {"prompt": prompt, **self.IMAGE_PARAMS}

        try:
            response = await self.client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("StarryAI API request failed: %s", e)
            raise UpstreamTransportError(f"StarryAI API request failed: {e}") from e

        if not response.is_success:
            logger.error("StarryAI API error: %s", response.text)
            raise UpstreamTransportError(
                f"StarryAI API error: {response.status_code} {response.text}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamTransportError(f"StarryAI API returned invalid JSON: {e}") from e

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
