"""Image generation protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ImageGenerator(Protocol):
    """Protocol for image generation backends (StarryAI by default)."""

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Request one image for ``prompt`` and return the decoded JSON answer.

        Raises:
            UpstreamTransportError: On network failure, non-2xx status,
                or a body that is not JSON
        """
        ...
