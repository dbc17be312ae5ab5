"""Agents preconfigured for specific chat-completion services."""

from __future__ import annotations

from toka.agent import BaseAgent

CLAUDE_URL = "https://api.anthropic.com/v1/messages"
CLAUDE_MODEL = "claude-3-5-sonnet-20241022"

DEEPSEEK_URL = "https://api.deepseek.com/chat/completions"
DEEPSEEK_MODEL = "deepseek-chat"

GPT4FREE_URL = "http://localhost:1337/v1/chat/completions"
GPT4FREE_MODEL = "gpt-4"

GROK_URL = "https://api.x.ai/v1/"
GROK_MODEL = "grok-beta"

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
OPENAI_MODEL = "gpt-4"


class ClaudeAgent(BaseAgent):
    """Agent for the Anthropic messages endpoint."""

    def __init__(self, name: str, api_key: str, system_content: str | None = None) -> None:
        super().__init__(name, CLAUDE_URL, api_key, system_content, CLAUDE_MODEL)

    def set_custom_provider(self, provider: str) -> None:
        """Select the model; this service has no separate provider setting."""
        self.model = provider


class DeepseekAgent(BaseAgent):
    """Agent for the DeepSeek chat endpoint."""

    def __init__(self, name: str, api_key: str, system_content: str | None = None) -> None:
        super().__init__(name, DEEPSEEK_URL, api_key, system_content, DEEPSEEK_MODEL)

    def set_custom_provider(self, provider: str) -> None:
        """Select the model; this service has no separate provider setting."""
        self.model = provider


class GPT4FreeAgent(BaseAgent):
    """Agent for a locally running gpt4free server; needs no API key."""

    def __init__(self, name: str, system_content: str | None = None) -> None:
        super().__init__(name, GPT4FREE_URL, None, system_content, GPT4FREE_MODEL)

    def set_custom_provider(self, provider: str) -> None:
        """Select the model; the provider setting is not changed."""
        self.model = provider


class GrokAgent(BaseAgent):
    """Agent for the xAI endpoint."""

    def __init__(self, name: str, api_key: str, system_content: str | None = None) -> None:
        super().__init__(name, GROK_URL, api_key, system_content, GROK_MODEL)

    def set_custom_provider(self, provider: str) -> None:
        """Select the model; this service has no separate provider setting."""
        self.model = provider


class OpenAiAgent(BaseAgent):
    """Agent for the OpenAI chat-completions endpoint."""

    def __init__(self, name: str, api_key: str, system_content: str | None = None) -> None:
        super().__init__(name, OPENAI_URL, api_key, system_content, OPENAI_MODEL)

    def set_custom_provider(self, provider: str) -> None:
        """Select the model; this service has no separate provider setting."""
        self.model = provider