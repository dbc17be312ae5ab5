import httpx
import pytest
import respx

from toka.agent import DEFAULT_SYSTEM_MESSAGE
from toka.providers import (
    ClaudeAgent,
    DeepseekAgent,
    GPT4FreeAgent,
    GrokAgent,
    OpenAiAgent,
)

REPLY_BODY = {
    "id": "id",
    "object": "chat.completion",
    "created": 1,
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "hi"}, "finish_reason": "stop"}
    ],
}


@pytest.mark.parametrize(
    "cls, url, model",
    [
        (ClaudeAgent, "https://api.anthropic.com/v1/messages", "claude-3-5-sonnet-20241022"),
        (DeepseekAgent, "https://api.deepseek.com/chat/completions", "deepseek-chat"),
        (GrokAgent, "https://api.x.ai/v1/", "grok-beta"),
        (OpenAiAgent, "https://api.openai.com/v1/chat/completions", "gpt-4"),
    ],
)
def test_keyed_agent_defaults(cls, url, model):
    agent = cls("bot", "placeholder")
    assert agent.name == "bot"
    assert agent.api_url == url
    assert agent.model == model
    assert agent.api_key == "placeholder"
    assert agent.provider is None
    assert [m.content for m in agent.system_messages()] == [DEFAULT_SYSTEM_MESSAGE]
    assert not agent.is_coder_agent()


def test_gpt4free_defaults():
    agent = GPT4FreeAgent("builder")
    assert agent.api_url == "http://localhost:1337/v1/chat/completions"
    assert agent.model == "gpt-4"
    assert agent.api_key is None


@pytest.mark.parametrize("cls", [ClaudeAgent, DeepseekAgent, GrokAgent, OpenAiAgent])
def test_system_content_replaces_default(cls):
    agent = cls("bot", "placeholder", "Be terse.")
    assert [m.content for m in agent.system_messages()] == ["Be terse."]


def test_gpt4free_system_content():
    agent = GPT4FreeAgent("bot", "Be terse.")
    assert [m.content for m in agent.system_messages()] == ["Be terse."]


@pytest.mark.parametrize(
    "agent",
    [
        ClaudeAgent("a", "placeholder"),
        DeepseekAgent("a", "placeholder"),
        GPT4FreeAgent("a"),
        GrokAgent("a", "placeholder"),
        OpenAiAgent("a", "placeholder"),
    ],
)
def test_custom_provider_sets_model(agent):
    agent.set_custom_provider("custom-model")
    assert agent.model == "custom-model"
    assert agent.provider is None


def test_import_export_keeps_class(tmp_path):
    agent = DeepseekAgent("exported", "placeholder")
    agent.convert_to_coder()
    agent.temperature = 0.7
    agent.max_tokens = 1000
    agent.add_system_msg("You are a Rust expert.")
    path = tmp_path / "dummy.agent"
    agent.export_to_file(path)

    imported = DeepseekAgent.import_from_file(path)
    assert isinstance(imported, DeepseekAgent)
    assert imported.model == agent.model
    assert imported.provider == agent.provider
    assert imported.temperature == agent.temperature
    assert imported.max_tokens == agent.max_tokens
    assert imported.system_messages() == agent.system_messages()
    assert imported.is_coder_agent() == agent.is_coder_agent()


@pytest.mark.asyncio
async def test_openai_sends_bearer_and_returns_reply():
    agent = OpenAiAgent("bot", "placeholder")
    with respx.mock:
        route = respx.post("https://api.openai.com/v1/chat/completions").mock(
            return_value=httpx.Response(200, json=REPLY_BODY)
        )
        reply = await agent.send_message("hello")
    assert reply == "hi"
    assert route.calls.last.request.headers["Authorization"] == "Bearer placeholder"
    assert [m.role for m in agent.messages] == ["system", "user", "assistant"]


@pytest.mark.asyncio
async def test_gpt4free_sends_no_authorization():
    agent = GPT4FreeAgent("bot")
    with respx.mock:
        route = respx.post("http://localhost:1337/v1/chat/completions").mock(
            return_value=httpx.Response(200, json=REPLY_BODY)
        )
        reply = await agent.send_message("hello")
    assert reply == "hi"
    assert "Authorization" not in route.calls.last.request.headers