"""Ready-made agent scenarios: building small programs and saving agents."""

from __future__ import annotations

from pathlib import Path

from toka.agent import AgentError, BaseAgent
from toka.providers import GPT4FreeAgent

ADDER_COMMAND = (
    "!build:adder.rs build me a rust program that will add together two user inputs "
    "and then print the result"
)
HELLO_WORLD_COMMAND = "!build:hello_world.rs build me a hello world programm in rust"

DEFAULT_EXPORT_PATH = "export/dummy.agent"
EXPERT_SYSTEM_MESSAGE = "You are a Rust expert."


async def _build(agent: BaseAgent | None, command: str) -> str:
    if agent is None:
        agent = GPT4FreeAgent("builder")
    agent.convert_to_coder()
    return await agent.send_message(command)


async def build_adder(agent: BaseAgent | None = None) -> str:
    """Have a coder agent write a program that adds two user inputs."""
    return await _build(agent, ADDER_COMMAND)


async def build_hello_world(agent: BaseAgent | None = None) -> str:
    """Have a coder agent write a hello-world program."""
    return await _build(agent, HELLO_WORLD_COMMAND)


def import_export_roundtrip(
    agent: BaseAgent | None = None, export_path: str | Path = DEFAULT_EXPORT_PATH
) -> BaseAgent:
    """Configure an agent, export it, import it back and verify the settings survived.

    Returns the imported agent; raises AgentError if any setting differs.
    """
    if agent is None:
        agent = GPT4FreeAgent("dummy")

    agent.convert_to_coder()
    agent.temperature = 0.7
    agent.max_tokens = 1000
    agent.add_system_msg(EXPERT_SYSTEM_MESSAGE)

    agent.export_to_file(export_path)
    imported = type(agent).import_from_file(export_path)

    checks = {
        "model": (agent.model, imported.model),
        "provider": (agent.provider, imported.provider),
        "temperature": (agent.temperature, imported.temperature),
        "max_tokens": (agent.max_tokens, imported.max_tokens),
        "system messages": (agent.system_messages(), imported.system_messages()),
        "coder mode": (agent.is_coder_agent(), imported.is_coder_agent()),
    }
    for label, (original, restored) in checks.items():
        if original != restored:
            raise AgentError(f"{label} mismatch after import: {original!r} != {restored!r}")
    return imported