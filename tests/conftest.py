"""Shared fixtures: mocked upstream APIs, in-memory stores and a test client."""

import json
from collections.abc import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from mood_journal.api.app import create_app
from mood_journal.repositories import (
    GeminiTextProvider,
    InMemoryDailyPromptStore,
    InMemoryEntryStore,
    InMemoryPreferencesStore,
    StarryImageProvider,
)


def gemini_reply(text: str) -> dict:
    """Build a well-formed Gemini generateContent answer."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class UpstreamRecorder:
    """Mock transport handler that replays queued answers and records requests."""

    def __init__(self, *answers: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        self._answers = list(answers)
        self.requests: list[httpx.Request] = []

    def queue(self, *answers) -> None:
        self._answers.extend(answers)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._answers:
            raise AssertionError(f"Unexpected upstream call: {request.url}")
        answer = self._answers.pop(0)
        if callable(answer) and not isinstance(answer, httpx.Response):
            return answer(request)
        return answer

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def gemini_upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def starry_upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def text_provider(gemini_upstream) -> GeminiTextProvider:
    return GeminiTextProvider(
        api_key="test-gemini-key",
        client=httpx.AsyncClient(transport=httpx.MockTransport(gemini_upstream)),
    )


@pytest.fixture
def image_provider(starry_upstream) -> StarryImageProvider:
    return StarryImageProvider(
        api_key="test-starry-key",
        client=httpx.AsyncClient(transport=httpx.MockTransport(starry_upstream)),
    )


@pytest.fixture
def prompt_store() -> InMemoryDailyPromptStore:
    return InMemoryDailyPromptStore()


@pytest.fixture
def entry_store() -> InMemoryEntryStore:
    return InMemoryEntryStore()


@pytest.fixture
def preferences_store() -> InMemoryPreferencesStore:
    return InMemoryPreferencesStore()


@pytest.fixture
def client(text_provider, image_provider, prompt_store, entry_store, preferences_store):
    """Create a test client with mocked upstreams and in-memory stores."""
    app = create_app(
        text_generator=text_provider,
        image_generator=image_provider,
        prompt_store=prompt_store,
        entry_store=entry_store,
        preferences_store=preferences_store,
        daily_prompt_delay=0,
    )
    with TestClient(app) as test_client:
        yield test_client
