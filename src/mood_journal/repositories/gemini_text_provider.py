"""Gemini-based text generation provider.

Calls the Generative Language API ``generateContent`` endpoint once per
prompt with fixed sampling parameters. The API key is read from the
``GEMINI_API_KEY`` environment variable on every call unless one was
passed explicitly.

Requirements:
    - ``GEMINI_API_KEY`` set in the environment (or ``.env``)
"""

import logging
import os
from typing import Any

import httpx

from mood_journal.config import settings
from mood_journal.errors import UpstreamTransportError

logger = logging.getLogger(__name__)


class GeminiTextProvider:
    """Gemini implementation of the TextGenerator protocol.

    This class satisfies the TextGenerator protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = GeminiTextProvider.create()
        data = await provider.generate("Write a journal prompt")
        print(data["candidates"][0]["content"]["parts"][0]["text"])
        ```
    """

    API_KEY_ENV = "GEMINI_API_KEY"

    # Sampling parameters are constant for every request
    GENERATION_CONFIG = {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 200,
    }

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gemini text provider.

        Args:
            model_name: Gemini model name. Defaults to settings.gemini_model.
            base_url: API base URL. Defaults to settings.gemini_base_url.
            api_key: API key. If None, read from the environment at call time.
            timeout: Request timeout in seconds.
            client: Preconfigured async client (mainly for tests).
        """
        self._model_name = model_name or settings.gemini_model
        self._base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self._api_key = api_key
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        model_name: str | None = None,
        base_url: str | None = None,
    ) -> "GeminiTextProvider":
        """Factory method to create GeminiTextProvider with defaults.

        Args:
            model_name: Model name. If None, uses settings.
            base_url: API URL. If None, uses settings.

        Returns:
            Configured GeminiTextProvider
        """
        return cls(model_name=model_name, base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model_name}:generateContent"

    def _current_api_key(self) -> str:
        if self._api_key is not None:
            return self._api_key
        return os.getenv(self.API_KEY_ENV, "")

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the ``generateContent`` request body for ``prompt``."""
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": dict(self.GENERATION_CONFIG),
        }

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Send one prompt to Gemini.

        Args:
            prompt: The full prompt text

        Returns:
            The decoded JSON answer

        Raises:
            UpstreamTransportError: If the request fails, the status is not
                2xx, or the body is not JSON
        """
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._current_api_key(),
        }

        try:
            response = await self.client.post(
                self.endpoint,
                json=self.build_payload(prompt),
                headers=headers,
            )
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error("Gemini API error: %s %s", e.response.status_code, e.response.text)
            raise UpstreamTransportError(
                f"Gemini API error: {e.response.status_code} {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Gemini API request failed: %s", e)
            raise UpstreamTransportError(f"Gemini API request failed: {e}") from e
        except ValueError as e:
            raise UpstreamTransportError(f"Gemini API returned invalid JSON: {e}") from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
