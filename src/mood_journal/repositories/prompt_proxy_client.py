"""HTTP client for a deployed prompt endpoint.

Lets a ``DailyPromptService`` run apart from the proxy (for example in a
separate worker) while still satisfying the PromptSource protocol.
"""

import httpx

from mood_journal.config import settings
from mood_journal.entities import PromptKind, PromptResponse, ResponseSource
from mood_journal.errors import UpstreamTransportError
from mood_journal.prompts import APOLOGY_RESPONSE


class PromptProxyClient:
    """PromptSource backed by ``POST /generate-prompt``.

    The endpoint only returns the text, so a response equal to the fixed
    apology string is reported as a fallback.
    """

    def __init__(
        self,
        url: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url or settings.prompt_proxy_url
        self._access_token = access_token
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def generate_prompt(
        self,
        kind: PromptKind,
        content: str | None = None,
    ) -> PromptResponse:
        """Call the prompt endpoint once.

        Raises:
            UpstreamTransportError: On network failure, non-2xx status or a
                body without a usable ``response`` string
        """
        headers = {"Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        body: dict[str, str] = {"promptType": kind.value}
        if content:
            body["content"] = content

        try:
            response = await self.client.post(self._url, json=body, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise UpstreamTransportError(f"Prompt endpoint request failed: {e}") from e
        except ValueError as e:
            raise UpstreamTransportError(f"Prompt endpoint returned invalid JSON: {e}") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise UpstreamTransportError(f"Prompt endpoint returned no response: {data}")

        source = ResponseSource.FALLBACK if text == APOLOGY_RESPONSE else ResponseSource.AI
        return PromptResponse(text=text, source=source)

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
