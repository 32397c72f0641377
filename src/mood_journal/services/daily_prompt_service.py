"""Daily prompt rotation.

Keeps up to three distinct reflection prompts per client and calendar
day, fetched sequentially from a PromptSource and rotated on refresh.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date

from mood_journal.config import settings
from mood_journal.entities import ClientContext, DailyPromptCache, PromptKind
from mood_journal.errors import StoreError
from mood_journal.prompts import DEFAULT_DAILY_PROMPTS
from mood_journal.protocols import DailyPromptStore, PromptSource

logger = logging.getLogger(__name__)


class DailyPromptService:
    """Daily prompt cache and rotator.

    Population issues up to ``count`` requests one after another with a
    short pause between them. A slot whose request fails, or whose answer
    is a fallback text, gets the static default for its position, so
    population never aborts. Duplicates are dropped. A store that cannot be
    read or written does not fail the request: the prompts are collected
    and returned without being cached.

    Example:
        ```python
        service = DailyPromptService.create(prompt_source=prompt_service, store=store)
        prompts = await service.get_or_fetch_daily_prompts(ctx)
        prompt = await service.next_prompt(ctx)
        ```
    """

    def __init__(
        self,
        prompt_source: PromptSource,
        store: DailyPromptStore,
        count: int | None = None,
        delay: float | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the daily prompt service.

        Args:
            prompt_source: Where prompts come from (required).
            store: Per-client cache storage (required).
            count: Prompts to collect per day (1-3). Defaults to settings.
            delay: Seconds to wait between population requests. Defaults to settings.
            sleep: Awaitable sleep, replaceable in tests.
        """
        self._source = prompt_source
        self._store = store
        self._count = min(count or settings.daily_prompt_count, DailyPromptCache.MAX_PROMPTS)
        self._delay = settings.daily_prompt_delay if delay is None else delay
        self._sleep = sleep

    @classmethod
    def create(
        cls,
        prompt_source: PromptSource,
        store: DailyPromptStore,
        count: int | None = None,
        delay: float | None = None,
    ) -> "DailyPromptService":
        """Factory method to create DailyPromptService with settings defaults."""
        return cls(prompt_source=prompt_source, store=store, count=count, delay=delay)

    @staticmethod
    def cycle(cache: DailyPromptCache) -> tuple[str, DailyPromptCache]:
        """Return the prompt under the cursor and the cache with the cursor advanced.

        The cursor wraps to 0 after the last prompt. An empty cache yields
        the first default prompt and keeps the cursor at 0.
        """
        if not cache.prompts:
            return DEFAULT_DAILY_PROMPTS[0], cache.with_cursor(0)

        length = len(cache.prompts)
        index = cache.cursor % length
        return cache.prompts[index], cache.with_cursor((index + 1) % length)

    async def get_or_fetch_daily_prompts(
        self,
        ctx: ClientContext,
        today: date | None = None,
    ) -> list[str]:
        """Return the day's prompts, populating them on the first request of the day."""
        cache, _ = await self._load_or_populate(ctx, today or date.today())
        return list(cache.prompts)

    async def load_cache(self, ctx: ClientContext, today: date | None = None) -> DailyPromptCache:
        """Return the day's cache (with cursor), populating it if absent."""
        cache, _ = await self._load_or_populate(ctx, today or date.today())
        return cache

    async def next_prompt(self, ctx: ClientContext, today: date | None = None) -> tuple[str, int]:
        """Handle a refresh action.

        Business logic:
        1. Load the day's cache, or populate it if absent
        2. If a loaded cache holds fewer than the wanted prompts, try one
           more request; a duplicate or fallback answer is discarded
        3. Cycle and persist the advanced cursor

        Returns:
            The prompt to show and the updated cursor
        """
        today = today or date.today()
        cache, populated = await self._load_or_populate(ctx, today)

        if not populated and len(cache.prompts) < self._count:
            cache = await self._top_up(cache)

        prompt, cache = self.cycle(cache)
        self._save(ctx, cache)
        return prompt, cache.cursor

    async def _load_or_populate(
        self,
        ctx: ClientContext,
        today: date,
    ) -> tuple[DailyPromptCache, bool]:
        try:
            cache = self._store.load(ctx.client_id, today)
        except StoreError as e:
            logger.warning("Daily prompt cache unavailable for %s, collecting anew: %s", ctx.client_id, e)
            cache = None
        if cache is not None:
            return cache, False

        cache = await self._populate(today)
        self._save(ctx, cache)
        logger.info(
            "Collected %d daily prompt(s) for %s on %s",
            len(cache.prompts),
            ctx.client_id,
            today.isoformat(),
        )
        return cache, True

    def _save(self, ctx: ClientContext, cache: DailyPromptCache) -> None:
        try:
            self._store.save(ctx.client_id, cache)
        except StoreError as e:
            logger.warning("Could not persist daily prompts for %s: %s", ctx.client_id, e)

    async def _populate(self, today: date) -> DailyPromptCache:
        cache = DailyPromptCache(day=today)
        for position in range(self._count):
            if position > 0 and self._delay > 0:
                await self._sleep(self._delay)
            cache = cache.with_prompt(await self._fetch_slot(position))
        return cache

    async def _fetch_slot(self, position: int) -> str:
        default = DEFAULT_DAILY_PROMPTS[position % len(DEFAULT_DAILY_PROMPTS)]
        try:
            response = await self._source.generate_prompt(PromptKind.DAILY)
        except Exception as e:
            logger.warning("Daily prompt request %d failed, using default: %s", position + 1, e)
            return default

        if response.is_fallback:
            return default
        return response.text

    async def _top_up(self, cache: DailyPromptCache) -> DailyPromptCache:
        try:
            response = await self._source.generate_prompt(PromptKind.DAILY)
        except Exception as e:
            logger.warning("Daily prompt refresh request failed: %s", e)
            return cache

        if response.is_fallback:
            return cache
        return cache.with_prompt(response.text)
