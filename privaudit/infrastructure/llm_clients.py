"""Chat model clients used for report recommendations."""

import httpx
from openai import AsyncOpenAI

from privaudit.infrastructure.http_client import request_json

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


class OpenAiLlmClient:
    """Completions through the OpenAI chat API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4",
        client: AsyncOpenAI | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._client = client or AsyncOpenAI(api_key=api_key)
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def complete(self, system_prompt: str, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content or ""


class AnthropicLlmClient:
    """Completions through the Anthropic messages API."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-sonnet-20241022",
        client: httpx.AsyncClient | None = None,
        timeout: float = 60.0,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        url: str = ANTHROPIC_MESSAGES_URL,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client
        self._timeout = timeout
        self._max_tokens = max_tokens
        self._url = url

    async def complete(self, system_prompt: str, prompt: str) -> str:
        data = await request_json(
            "POST",
            self._url,
            client=self._client,
            timeout=self._timeout,
            headers={
                "x-api-key": self._api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
            json={
                "model": self._model,
                "max_tokens": self._max_tokens,
                "system": system_prompt,
                "messages": [{"role": "user", "content": prompt}],
            },
        )
        parts = [
            block.get("text", "").strip()
            for block in data.get("content", [])
            if block.get("type") == "text"
        ]
        return "\n\n".join(part for part in parts if part)


__all__ = ["OpenAiLlmClient", "AnthropicLlmClient"]
