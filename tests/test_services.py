"""
Tests for prompt, artwork, journal and preferences services.
"""

import asyncio
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from conftest import gemini_reply
from mood_journal.entities import (
    ClientContext,
    JournalEntry,
    Mood,
    PromptKind,
    PromptResponse,
    ResponseSource,
    UserPreferences,
)
from mood_journal.errors import NoEntriesError, StoreError, UpstreamShapeError, UpstreamTransportError
from mood_journal.prompts import (
    APOLOGY_RESPONSE,
    ARTWORK_STYLES,
    DEFAULT_ARTWORK_STYLE,
    DEFAULT_WRITING_PROMPT,
    RANT_EMPTY_RESPONSE,
    RANT_ERROR_RESPONSE,
)
from mood_journal.repositories import (
    GeminiTextProvider,
    InMemoryEntryStore,
    InMemoryPreferencesStore,
    PromptProxyClient,
)
from mood_journal.services import ArtworkService, JournalService, PreferencesService, PromptService


# --- PromptService ---


def test_build_prompt_without_content():
    prompt = PromptService.build_prompt(PromptKind.DAILY)
    assert "\n\nUser content:" not in prompt


def test_build_prompt_with_content():
    prompt = PromptService.build_prompt(PromptKind.RANT_RESPONSE, "so tired")
    assert prompt.endswith("\n\nUser content: so tired")


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"candidates": None},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        ["not", "a", "dict"],
    ],
)
def test_extract_text_rejects_unexpected_shapes(data):
    with pytest.raises(UpstreamShapeError):
        PromptService.extract_text(data)


def test_generate_prompt_ai_and_fallback(text_provider, gemini_upstream):
    gemini_upstream.queue(
        httpx.Response(200, json=gemini_reply("Breathe.")),
        httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}),
    )
    service = PromptService.create(text_generator=text_provider)

    first = asyncio.run(service.generate_prompt(PromptKind.DAILY))
    second = asyncio.run(service.generate_prompt(PromptKind.RANT_RESPONSE, "angry words"))

    assert first == PromptResponse(text="Breathe.", source=ResponseSource.AI)
    assert second == PromptResponse(text=APOLOGY_RESPONSE, source=ResponseSource.FALLBACK)
    assert len(gemini_upstream.requests) == 2


def test_generate_prompt_invalid_json_is_transport_error(text_provider, gemini_upstream):
    gemini_upstream.queue(httpx.Response(200, text="<html>oops</html>"))
    service = PromptService.create(text_generator=text_provider)

    with pytest.raises(UpstreamTransportError):
        asyncio.run(service.generate_prompt(PromptKind.DAILY))


def test_api_key_is_read_at_call_time(monkeypatch, gemini_upstream):
    provider = GeminiTextProvider(client=httpx.AsyncClient(transport=httpx.MockTransport(gemini_upstream)))
    gemini_upstream.queue(
        httpx.Response(200, json=gemini_reply("one")),
        httpx.Response(200, json=gemini_reply("two")),
    )

    monkeypatch.setenv("GEMINI_API_KEY", "first-key")
    asyncio.run(provider.generate("hi"))
    monkeypatch.setenv("GEMINI_API_KEY", "rotated-key")
    asyncio.run(provider.generate("hi"))

    assert [r.headers["x-goog-api-key"] for r in gemini_upstream.requests] == ["first-key", "rotated-key"]


# --- ArtworkService ---


def test_artwork_prompt_short_content_is_base_phrase():
    assert ArtworkService.build_prompt("tiny note", Mood.HAPPY) == ARTWORK_STYLES[Mood.HAPPY]
    assert ArtworkService.build_prompt("exactly 10", Mood.HAPPY) == ARTWORK_STYLES[Mood.HAPPY]


def test_artwork_prompt_angry_long_content_is_truncated():
    content = "x" * 150

    prompt = ArtworkService.build_prompt(content, Mood.ANGRY)

    assert prompt == (
        "Create a transformative digital artwork that channels intense emotions into beauty"
        " that reflects: " + content[:100]
    )


def test_artwork_prompt_unknown_mood_uses_default():
    assert ArtworkService.build_prompt("", None) == DEFAULT_ARTWORK_STYLE
    assert ArtworkService.build_prompt("", "Elated") == DEFAULT_ARTWORK_STYLE


def test_artwork_parse_result_tolerates_missing_fields():
    result = ArtworkService.parse_result("p", {"output": [{"image_url": ""}]})
    assert result.image_url is None
    assert result.generation_id is None


# --- JournalService ---


class FailingEntryStore(InMemoryEntryStore):
    def add(self, entry):
        raise StoreError("disk full")


class StaticPromptSource:
    def __init__(self, outcome):
        self._outcome = outcome
        self.calls = []

    async def generate_prompt(self, kind, content=None):
        self.calls.append((kind, content))
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


CTX = ClientContext(client_id="writer")


def test_rant_upstream_failure_uses_error_fallback():
    store = InMemoryEntryStore()
    source = StaticPromptSource(UpstreamTransportError("timeout"))
    service = JournalService.create(entry_store=store, prompt_source=source)

    reply = asyncio.run(service.submit_rant(CTX, "Everything is late"))

    assert reply.response == RANT_ERROR_RESPONSE
    assert reply.source is ResponseSource.FALLBACK
    assert reply.saved is True
    assert source.calls == [(PromptKind.RANT_RESPONSE, "Everything is late")]


def test_rant_empty_response_uses_empty_fallback():
    source = StaticPromptSource(PromptResponse(text=" "))
    service = JournalService.create(entry_store=InMemoryEntryStore(), prompt_source=source)

    reply = asyncio.run(service.submit_rant(CTX, "meh", burn_after_writing=True))

    assert reply.response == RANT_EMPTY_RESPONSE
    assert reply.saved is False


def test_rant_store_failure_propagates_without_upstream_call():
    source = StaticPromptSource(PromptResponse(text="ok"))
    service = JournalService.create(entry_store=FailingEntryStore(), prompt_source=source)

    with pytest.raises(StoreError):
        asyncio.run(service.submit_rant(CTX, "save me"))
    assert source.calls == []


def test_burned_entry_is_never_stored():
    store = InMemoryEntryStore()
    service = JournalService.create(entry_store=store, prompt_source=StaticPromptSource(None))

    entry, saved = service.create_entry(CTX, "secret", Mood.SAD, burn_after_writing=True)

    assert saved is False
    assert entry.burn_after_writing is True
    assert service.list_entries(CTX) == []


def test_mood_prompt_default():
    assert JournalService.mood_prompt(None) == DEFAULT_WRITING_PROMPT
    assert JournalService.mood_prompt("Calm").startswith("What is bringing you peace")


class RecordingImageGenerator:
    def __init__(self):
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        return {"id": "g1", "output": [{"image_url": "https://img.example.com/x.png"}]}


def test_daily_artwork_joins_newest_entries_with_newest_mood():
    store = InMemoryEntryStore()
    start = datetime(2024, 2, 1, tzinfo=timezone.utc)
    for i, mood in enumerate([Mood.SAD, Mood.HAPPY, Mood.CALM]):
        store.add(
            JournalEntry(
                client_id=CTX.client_id,
                content=f"day {i}",
                mood=mood,
                created_at=start + timedelta(days=i),
            )
        )
    generator = RecordingImageGenerator()
    service = JournalService.create(
        entry_store=store,
        prompt_source=StaticPromptSource(None),
        artwork_service=ArtworkService.create(image_generator=generator),
    )

    result = asyncio.run(service.daily_artwork(CTX))

    assert generator.prompts == [f"{ARTWORK_STYLES[Mood.CALM]} that reflects: day 2 day 1 day 0"]
    assert result.image_url == "https://img.example.com/x.png"


def test_daily_artwork_without_entries_makes_no_image_call():
    generator = RecordingImageGenerator()
    service = ArtworkService.create(image_generator=generator)

    with pytest.raises(NoEntriesError):
        asyncio.run(service.generate_daily([]))
    assert generator.prompts == []


# --- PreferencesService ---


def test_preferences_first_read_stores_defaults():
    store = InMemoryPreferencesStore()
    service = PreferencesService.create(store=store)

    preferences = service.get(CTX)

    assert preferences == UserPreferences(client_id=CTX.client_id)
    assert store.load(CTX.client_id) == preferences


def test_preferences_update_keeps_unset_fields():
    store = InMemoryPreferencesStore()
    store.save(UserPreferences(client_id=CTX.client_id, notification_enabled=False, dark_mode=True))
    service = PreferencesService.create(store=store)

    updated = service.update(CTX, daily_reminder_enabled=True)

    assert updated == UserPreferences(
        client_id=CTX.client_id,
        notification_enabled=False,
        daily_reminder_enabled=True,
        dark_mode=True,
    )


# --- PromptProxyClient ---


def test_proxy_client_marks_apology_as_fallback():
    recorder = []

    def endpoint(request):
        recorder.append(request)
        if len(recorder) == 1:
            return httpx.Response(200, json={"response": "Name one small win."})
        return httpx.Response(200, json={"response": APOLOGY_RESPONSE})

    proxy = PromptProxyClient(
        url="http://proxy.test/generate-prompt",
        access_token="jwt",
        client=httpx.AsyncClient(transport=httpx.MockTransport(endpoint)),
    )

    first = asyncio.run(proxy.generate_prompt(PromptKind.DAILY))
    second = asyncio.run(proxy.generate_prompt(PromptKind.RANT_RESPONSE, "argh"))

    assert first == PromptResponse(text="Name one small win.", source=ResponseSource.AI)
    assert second.is_fallback
    assert recorder[0].headers["authorization"] == "Bearer jwt"
    assert [json.loads(r.read()) for r in recorder] == [
        {"promptType": "daily"},
        {"promptType": "rant-response", "content": "argh"},
    ]


def test_proxy_client_error_body_is_transport_error():
    proxy = PromptProxyClient(
        url="http://proxy.test/generate-prompt",
        client=httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(500, json={"error": "boom"}))
        ),
    )

    with pytest.raises(UpstreamTransportError):
        asyncio.run(proxy.generate_prompt(PromptKind.DAILY))
