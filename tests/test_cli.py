import io

import httpx
import pytest
import respx

from toka.agent import BaseAgent
from toka.cli import chat_mode, format_agents, help_text, run
from toka.providers import GPT4FreeAgent

URL = "http://localhost:1337/v1/chat/completions"
REPLY_BODY = {
    "id": "id",
    "object": "chat.completion",
    "created": 1,
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "hi"}, "finish_reason": "stop"}
    ],
}


def test_format_agents_lists_types():
    chat = GPT4FreeAgent("Alpha")
    coder = GPT4FreeAgent("Beta")
    coder.convert_to_coder()
    tweeter = GPT4FreeAgent("Gamma")
    tweeter.convert_to_twitter()
    lines = format_agents([chat, coder, tweeter]).splitlines()
    assert lines[1] == "Available Agents:"
    assert lines[2] == "Idx | Type    | Name"
    assert lines[4:] == [
        "  0 | Chat    | Alpha",
        "  1 | Coder   | Beta",
        "  2 | Twitter | Gamma",
    ]


def test_help_text_lists_commands():
    text = help_text()
    assert "chat <agent nr> - Chat with the specified agent" in text
    assert "quit - Exit the program" in text
    assert text.startswith("\nCommands:\n")


@pytest.mark.asyncio
async def test_run_quit_prints_menu_once():
    out = io.StringIO()
    await run([GPT4FreeAgent("Alpha")], ["quit"], out)
    assert out.getvalue().count("Available Agents:") == 1


@pytest.mark.asyncio
async def test_run_converts_agents():
    agents = [GPT4FreeAgent("Alpha")]
    out = io.StringIO()
    await run(agents, ["convert to coder 0", "convert to twitter 0", "quit"], out)
    assert "Agent 0 converted to coder mode!" in out.getvalue()
    assert "Agent 0 converted to twitter mode!" in out.getvalue()
    assert agents[0].is_twitter_agent()
    assert not agents[0].is_coder_agent()


@pytest.mark.asyncio
async def test_run_convert_back_to_chat():
    agents = [GPT4FreeAgent("Alpha")]
    out = io.StringIO()
    await run(agents, ["convert to coder 0", "convert to chat 0"], out)
    assert not agents[0].is_coder_agent()
    assert "Agent 0 converted to chat mode!" in out.getvalue()


@pytest.mark.asyncio
async def test_run_invalid_and_unknown_commands():
    agents = [GPT4FreeAgent("Alpha")]
    out = io.StringIO()
    await run(agents, ["chat 5", "dance", "convert to coder x", "quit"], out)
    text = out.getvalue()
    assert text.count("Invalid agent number.") == 1
    assert text.count("Unknown command.") == 1
    assert not agents[0].is_coder_agent()


@pytest.mark.asyncio
async def test_run_export_then_import(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "export").mkdir()
    agents = [GPT4FreeAgent("Alpha")]
    agents[0].convert_to_coder()
    out = io.StringIO()
    await run(agents, ["export 0", "import agent_Alpha.agent", "quit"], out)
    text = out.getvalue()
    assert "Agent 0 exported successfully to export/agent_Alpha.agent" in text
    assert "Agent imported successfully from export/agent_Alpha.agent" in text
    assert len(agents) == 2
    assert isinstance(agents[1], BaseAgent)
    assert agents[1].name == "Alpha"
    assert agents[1].is_coder_agent()
    assert agents[1].system_messages() == agents[0].system_messages()


@pytest.mark.asyncio
async def test_run_import_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    agents = [GPT4FreeAgent("Alpha")]
    out = io.StringIO()
    await run(agents, ["import nothing.agent", "quit"], out)
    assert "Error importing agent:" in out.getvalue()
    assert len(agents) == 1


@pytest.mark.asyncio
async def test_chat_mode_relays_reply():
    agent = GPT4FreeAgent("Alpha")
    out = io.StringIO()
    with respx.mock:
        respx.post(URL).mock(return_value=httpx.Response(200, json=REPLY_BODY))
        await chat_mode(agent, ["hello", "quit"], out)
    assert "Alpha: hi\n" in out.getvalue()
    assert [m.content for m in agent.messages[1:]] == ["hello", "hi"]


@pytest.mark.asyncio
async def test_chat_mode_reports_http_error():
    agent = GPT4FreeAgent("Alpha")
    out = io.StringIO()
    with respx.mock:
        respx.post(URL).mock(return_value=httpx.Response(500))
        await chat_mode(agent, ["hello"], out)
    assert "Error: HTTP Error: 500" in out.getvalue()


@pytest.mark.asyncio
async def test_run_chat_then_back_to_menu():
    agents = [GPT4FreeAgent("Alpha")]
    out = io.StringIO()
    with respx.mock:
        respx.post(URL).mock(return_value=httpx.Response(200, json=REPLY_BODY))
        await run(agents, ["chat 0", "hello", "quit", "quit"], out)
    text = out.getvalue()
    assert "Entering chat mode. Type 'quit' to return." in text
    assert "Alpha: hi" in text
    assert text.count("Available Agents:") == 2