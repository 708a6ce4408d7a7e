"""Port for large-language-model completions."""

from typing import Protocol


class LlmClientPort(Protocol):
    """Port sending a prompt to a chat model."""

    async def complete(self, system_prompt: str, prompt: str) -> str:
        """Return the model's text response."""


__all__ = ["LlmClientPort"]
