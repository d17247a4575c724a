"""
Chat completion calls against an OpenAI-compatible provider (OpenRouter by default).
"""

from typing import Any, Optional

from openai import OpenAI, OpenAIError

from .config import AssistantConfig
from .errors import CompletionError


class CompletionClient:
    """Sends a single-message prompt and returns the reply text."""

    def __init__(self, config: AssistantConfig, client: Optional[Any] = None):
        """
        Initialize the completion client.

        Args:
            config: Assistant configuration (credential, base URL, model, timeout)
            client: Pre-built OpenAI client, mainly for tests
        """
        self.model = config.model
        self.client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Request a completion for a prompt.

        Args:
            prompt: User message content
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature

        Returns:
            The first choice's message content, or "" if the provider returned none
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise CompletionError("Text generation request failed", str(e)) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
