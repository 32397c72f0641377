"""Prompt source protocol.

Anything that can turn a prompt request into a normalized
``PromptResponse``: the in-process ``PromptService`` or the HTTP
``PromptProxyClient`` talking to a deployed prompt endpoint.
"""

from typing import Protocol, runtime_checkable

from mood_journal.entities import PromptKind, PromptResponse


@runtime_checkable
class PromptSource(Protocol):
    async def generate_prompt(
        self,
        kind: PromptKind,
        content: str | None = None,
    ) -> PromptResponse:
        """Produce one prompt response.

        Raises:
            UpstreamTransportError: If the text could not be obtained at all
        """
        ...
