"""Tests for the OpenAI-backed provider's error mapping."""

from types import SimpleNamespace

import httpx
import openai
import pytest

from app.config import Settings
from app.services.ai.provider import AIProvider
from app.utils.exceptions import ProviderUnavailableError


def provider_with_create(monkeypatch, create) -> AIProvider:
    provider = AIProvider(Settings(openai_api_key="sk-test"))
    monkeypatch.setattr(provider._get_client().chat.completions, "create", create)
    return provider


async def test_missing_api_key_is_unavailable():
    provider = AIProvider(Settings(openai_api_key=""))

    with pytest.raises(ProviderUnavailableError):
        await provider.complete("system", "user", max_tokens=10, temperature=0.5)


async def test_connection_error_is_unavailable(monkeypatch):
    async def create(**kwargs):
        raise openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))

    provider = provider_with_create(monkeypatch, create)

    with pytest.raises(ProviderUnavailableError):
        await provider.complete("system", "user", max_tokens=10, temperature=0.5)


async def test_returns_message_text_and_passes_settings(monkeypatch):
    seen = {}

    async def create(**kwargs):
        seen.update(kwargs)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content='{"html": ""}'))])

    provider = provider_with_create(monkeypatch, create)

    text = await provider.complete("system", "user", max_tokens=16000, temperature=0.8)

    assert text == '{"html": ""}'
    assert seen["model"] == "gpt-4o"
    assert seen["max_tokens"] == 16000
    assert seen["temperature"] == 0.8
    assert [m["role"] for m in seen["messages"]] == ["system", "user"]


async def test_empty_choices_return_empty_text(monkeypatch):
    async def create(**kwargs):
        return SimpleNamespace(choices=[])

    provider = provider_with_create(monkeypatch, create)

    assert await provider.complete("system", "user", max_tokens=10, temperature=0.5) == ""
