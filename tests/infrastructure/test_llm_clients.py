"""Tests for the chat model clients."""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx

from privaudit.infrastructure.llm_clients import (
    AnthropicLlmClient,
    OpenAiLlmClient,
)


def test_openai_client_sends_system_and_user_messages() -> None:
    """The OpenAI client returns the first choice content."""
    create = AsyncMock(
        return_value=SimpleNamespace(
            choices=[
                SimpleNamespace(
                    message=SimpleNamespace(content="1. Hold stablecoins")
                )
            ]
        )
    )
    fake = SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create))
    )
    client = OpenAiLlmClient("key", model="gpt-4o", client=fake)

    response = asyncio.run(client.complete("system", "prompt"))

    assert response == "1. Hold stablecoins"
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gpt-4o"
    assert kwargs["messages"][0] == {"role": "system", "content": "system"}
    assert kwargs["messages"][1] == {"role": "user", "content": "prompt"}


def test_openai_client_handles_empty_content() -> None:
    """A missing content field becomes an empty string."""
    create = AsyncMock(
        return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
        )
    )
    fake = SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create))
    )

    response = asyncio.run(
        OpenAiLlmClient("key", client=fake).complete("s", "p")
    )

    assert response == ""


def test_anthropic_client_joins_text_blocks() -> None:
    """Text blocks are joined and other blocks ignored."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "content": [
                    {"type": "text", "text": "1. Hold stablecoins"},
                    {"type": "tool_use", "id": "x"},
                    {"type": "text", "text": "2. Trim ETH "},
                ]
            },
        )

    async def _inner():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler)
        ) as http:
            client = AnthropicLlmClient("secret", model="claude", client=http)
            return await client.complete("system", "prompt")

    response = asyncio.run(_inner())

    assert response == "1. Hold stablecoins\n\n2. Trim ETH"
    request = seen[0]
    assert request.headers["x-api-key"] == "secret"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body["model"] == "claude"
    assert body["system"] == "system"
    assert body["messages"] == [{"role": "user", "content": "prompt"}]
