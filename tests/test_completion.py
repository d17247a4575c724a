from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from invoice_assistant.core.completion import CompletionClient
from invoice_assistant.core.config import AssistantConfig
from invoice_assistant.core.errors import CompletionError


def make_completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def openai_client():
    return MagicMock()


@pytest.fixture
def client(openai_client):
    config = AssistantConfig(api_key="k", api_url="https://api.example.com", model="openai/gpt-4o-mini")
    return CompletionClient(config, client=openai_client)


def test_sends_single_user_message(client, openai_client):
    openai_client.chat.completions.create.return_value = make_completion('{"a": 1}')

    assert client.complete("hello", 512, 0.5) == '{"a": 1}'
    openai_client.chat.completions.create.assert_called_once_with(
        model="openai/gpt-4o-mini",
        messages=[{"role": "user", "content": "hello"}],
        max_tokens=512,
        temperature=0.5,
    )


def test_no_choices_returns_empty_string(client, openai_client):
    openai_client.chat.completions.create.return_value = make_completion()

    assert client.complete("hello", 256, 0.4) == ""


def test_null_content_returns_empty_string(client, openai_client):
    openai_client.chat.completions.create.return_value = make_completion(None)

    assert client.complete("hello", 256, 0.4) == ""


def test_provider_error_is_wrapped(client, openai_client):
    request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
    openai_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

    with pytest.raises(CompletionError):
        client.complete("hello", 256, 0.7)


def test_builds_openai_client_from_config():
    config = AssistantConfig(api_key="secret", api_url="https://api.example.com",
                             base_url="https://openrouter.ai/api/v1", timeout=12)

    client = CompletionClient(config)

    assert client.client.api_key == "secret"
    assert str(client.client.base_url).rstrip("/") == "https://openrouter.ai/api/v1"
    assert client.client.timeout == 12
