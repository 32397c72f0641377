#!/usr/bin/env python3
"""
Demo script for the mood journal services.

Runs the daily prompt rotation, a rant reply and an artwork prompt against
the real upstream APIs, keeping all state in memory. Requires
GEMINI_API_KEY (and STARRY_AI_API_KEY for the artwork call) in the
environment or a .env file.
"""

import asyncio
import os

from mood_journal.entities import ClientContext, Mood
from mood_journal.errors import UpstreamTransportError
from mood_journal.repositories import (
    GeminiTextProvider,
    InMemoryDailyPromptStore,
    InMemoryEntryStore,
    StarryImageProvider,
)
from mood_journal.services import (
    ArtworkService,
    DailyPromptService,
    JournalService,
    PromptService,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_daily_prompts(prompts: PromptService, ctx: ClientContext) -> None:
    """Demonstrate daily prompt collection and rotation."""
    print_section("Daily Prompts")

    daily = DailyPromptService.create(prompt_source=prompts, store=InMemoryDailyPromptStore())

    collected = await daily.get_or_fetch_daily_prompts(ctx)
    print(f"\n📝 Collected {len(collected)} prompt(s) for today:")
    for prompt in collected:
        print(f"  • {prompt}")

    print("\n🔄 Refreshing (no new upstream calls once the day is full):")
    for _ in range(len(collected) + 1):
        prompt, cursor = await daily.next_prompt(ctx)
        print(f"  [{cursor}] {prompt}")


async def demo_rant(prompts: PromptService, ctx: ClientContext) -> None:
    """Demonstrate rant mode with burn after writing."""
    print_section("Rant Mode")

    journal = JournalService.create(entry_store=InMemoryEntryStore(), prompt_source=prompts)
    reply = await journal.submit_rant(
        ctx,
        "My whole afternoon disappeared into meetings that could have been emails.",
        burn_after_writing=True,
    )
    print(f"\n  Saved: {reply.saved}")
    print(f"  Source: {reply.source.value}")
    print(f"  Reply: {reply.response}")


async def demo_artwork() -> None:
    """Demonstrate artwork prompt building and generation."""
    print_section("Artwork")

    service = ArtworkService.create(image_generator=StarryImageProvider.create())
    content = "Spent the morning in the garden watching the light move across the leaves."

    for mood in Mood:
        print(f"  {mood.value:8} → {service.build_prompt(content, mood)[:90]}...")

    if not os.getenv("STARRY_AI_API_KEY"):
        print("\n  STARRY_AI_API_KEY not set, skipping generation")
        return

    try:
        result = await service.generate(content, Mood.CALM)
        print(f"\n  ✓ Image: {result.image_url} (generation {result.generation_id})")
    except UpstreamTransportError as e:
        print(f"\n  ✗ {e}")


async def main() -> None:
    """Run all demos."""
    ctx = ClientContext(client_id="demo")
    text_provider = GeminiTextProvider.create()
    prompts = PromptService.create(text_generator=text_provider)

    try:
        await demo_daily_prompts(prompts, ctx)
        await demo_rant(prompts, ctx)
        await demo_artwork()
    finally:
        await text_provider.close()

    print_section("Demo Complete")


if __name__ == "__main__":
    asyncio.run(main())
