"""
Configuration for the invoice assistant.

Components receive an ``AssistantConfig`` explicitly; only entry points call
``AssistantConfig.from_env()``.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class AssistantConfig:
    api_key: str
    api_url: str
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "AssistantConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            AssistantConfig instance
        """
        env = os.environ if environ is None else environ

        api_key = env.get("OPENROUTER_API_KEY")
        if not api_key:
            raise ValueError("OpenRouter API key not found. Set OPENROUTER_API_KEY environment variable.")

        api_url = env.get("API_URL")
        if not api_url:
            raise ValueError("API_URL environment variable not found.")

        timeout = env.get("AI_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"AI_TIMEOUT must be a number of seconds, got {timeout!r}") from None

        return cls(
            api_key=api_key,
            api_url=api_url.rstrip("/"),
            base_url=env.get("OPENROUTER_BASE_URL") or DEFAULT_BASE_URL,
            model=env.get("AI_MODEL") or DEFAULT_MODEL,
            timeout=timeout,
        )
