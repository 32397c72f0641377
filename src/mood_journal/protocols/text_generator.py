"""Text generation protocol.

Defines the interface for an external generative text API. The
implementation only performs the HTTP exchange; extracting the text
from the answer is the service's job.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """Protocol for generative text backends (Gemini by default)."""

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the model."""
        ...

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Send one prompt and return the decoded JSON answer.

        Args:
            prompt: The full prompt text

        Returns:
            The upstream JSON body, unvalidated

        Raises:
            UpstreamTransportError: On network failure, non-2xx status,
                or a body that is not JSON
        """
        ...
