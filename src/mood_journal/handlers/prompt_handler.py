"""HTTP handlers for prompt operations.

Handlers convert between DTOs (API contracts) and service calls.
Upstream failures propagate as ``UpstreamTransportError`` and are turned
into ``{"error": ...}`` 500 responses by the app's exception handler.
"""

from datetime import date

from mood_journal.dto import (
    DailyPromptsResponse,
    GeneratePromptRequest,
    GeneratePromptResponse,
    NextPromptResponse,
)
from mood_journal.entities import ClientContext
from mood_journal.services import DailyPromptService, PromptService


class PromptHandler:
    """HTTP handlers for the prompt proxy and the daily prompt rotation.

    Example:
        ```python
        handler = PromptHandler(prompt_service=prompts, daily_prompt_service=daily)

        @app.post("/generate-prompt", response_model=GeneratePromptResponse)
        async def generate_prompt(request: GeneratePromptRequest):
            return await handler.generate_prompt(request)
        ```
    """

    def __init__(
        self,
        prompt_service: PromptService,
        daily_prompt_service: DailyPromptService,
    ) -> None:
        """Initialize the prompt handler.

        Args:
            prompt_service: Prompt generation (required).
            daily_prompt_service: Daily prompt cache and rotation (required).
        """
        self._prompts = prompt_service
        self._daily = daily_prompt_service

    async def generate_prompt(self, request: GeneratePromptRequest) -> GeneratePromptResponse:
        """Handle POST /generate-prompt requests.

        Returns:
            GeneratePromptResponse; the text is the apology string when the
            upstream answer had an unexpected shape
        """
        result = await self._prompts.generate_prompt(request.prompt_type, request.content)
        return GeneratePromptResponse(response=result.text)

    async def daily_prompts(
        self,
        ctx: ClientContext,
        day: date | None = None,
    ) -> DailyPromptsResponse:
        """Handle GET /prompts/daily requests."""
        cache = await self._daily.load_cache(ctx, day)
        return DailyPromptsResponse(day=cache.day, prompts=list(cache.prompts), cursor=cache.cursor)

    async def next_prompt(self, ctx: ClientContext, day: date | None = None) -> NextPromptResponse:
        """Handle POST /prompts/daily/next requests."""
        prompt, cursor = await self._daily.next_prompt(ctx, day)
        return NextPromptResponse(prompt=prompt, cursor=cursor)
