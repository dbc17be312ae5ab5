"""Interactive command loop for managing and chatting with agents."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

import httpx

from toka.agent import AgentError, BaseAgent
from toka.providers import GPT4FreeAgent

LOGO = """
    ████████╗ ██████╗ ██╗  ██╗ █████╗ 
    ╚══██╔══╝██╔═══██╗██║ ██╔╝██╔══██╗
       ██║   ██║   ██║█████╔╝ ███████║
       ██║   ██║   ██║██╔═██╗ ██╔══██║
       ██║   ╚██████╔╝██║  ██╗██║  ██║
       ╚═╝    ╚═════╝ ╚═╝  ╚═╝╚═╝  ╚═╝
    """
VERSION_LINE = "ver: alpha 1.0.0"

_AGENT_ERRORS = (AgentError, httpx.HTTPError, OSError, ValueError)


def _agent_type(agent: BaseAgent) -> str:
    if agent.is_coder_agent():
        return "Coder"
    if agent.is_twitter_agent():
        return "Twitter"
    return "Chat"


def format_agents(agents: Iterable[BaseAgent]) -> str:
    """Render the agent table."""
    rows = [
        "",
        "Available Agents:",
        "Idx | Type    | Name",
        "----------------------------",
    ]
    rows.extend(
        f"{index:3} | {_agent_type(agent):7} | {agent.name}" for index, agent in enumerate(agents)
    )
    return "\n".join(rows) + "\n"


def help_text() -> str:
    """Return the command summary."""
    return (
        "\nCommands:\n"
        "chat <agent nr> - Chat with the specified agent\n"
        "convert to coder <agent nr> - Convert an agent to coder mode\n"
        "convert to twitter <agent nr> - Convert an agent to twitter mode\n"
        "convert to chat <agent nr> - Convert an agent to chat mode\n"
        "import <filename> - import a new agent\n"
        "export <agent nr> - export an agent\n"
        "quit - Exit the program\n\n"
    )


def _parse_index(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def _next_line(lines: Iterator[str]) -> str | None:
    line = next(lines, None)
    return None if line is None else line.strip()


async def chat_mode(
    agent: BaseAgent, lines: Iterable[str] | None = None, out: TextIO | None = None
) -> None:
    """Relay lines to ``agent`` until ``quit`` or end of input."""
    source = iter(sys.stdin if lines is None else lines)
    out = sys.stdout if out is None else out
    out.write("\nEntering chat mode. Type 'quit' to return.\n")
    while True:
        out.write("> ")
        out.flush()
        user_input = _next_line(source)
        if user_input is None or user_input == "quit":
            return
        try:
            response = await agent.send_message(user_input)
        except _AGENT_ERRORS as exc:
            out.write(f"Error: {exc}\n")
        else:
            out.write(f"{agent.name}: {response}\n")


async def run(
    agents: list[BaseAgent], lines: Iterable[str] | None = None, out: TextIO | None = None
) -> None:
    """Run the command loop over ``lines`` until ``quit`` or end of input."""
    source = iter(sys.stdin if lines is None else lines)
    out = sys.stdout if out is None else out

    def pick(argument: str) -> BaseAgent | None:
        index = _parse_index(argument)
        if index is None:
            return None
        if index >= len(agents):
            out.write("Invalid agent number.\n")
            return None
        return agents[index]

    conversions = (
        ("convert to coder ", "convert_to_coder", "coder"),
        ("convert to twitter ", "convert_to_twitter", "twitter"),
        ("convert to chat ", "convert_to_chat", "chat"),
    )

    while True:
        out.write(format_agents(agents))
        out.write(help_text())
        command = _next_line(source)
        if command is None or command == "quit":
            return

        if command.startswith("chat "):
            agent = pick(command[len("chat "):])
            if agent is not None:
                await chat_mode(agent, source, out)
            continue

        conversion = next((c for c in conversions if command.startswith(c[0])), None)
        if conversion is not None:
            prefix, method, mode = conversion
            agent = pick(command[len(prefix):])
            if agent is not None:
                getattr(agent, method)()
                out.write(f"Agent {agents.index(agent)} converted to {mode} mode!\n")
            continue

        if command.startswith("import "):
            file_path = f"export/{command[len('import '):]}"
            try:
                imported = BaseAgent.import_from_file(file_path)
            except (AgentError, OSError) as exc:
                out.write(f"Error importing agent: {exc}\n")
            else:
                agents.append(imported)
                out.write(f"Agent imported successfully from {file_path}\n")
            continue

        if command.startswith("export "):
            argument = command[len("export "):]
            agent = pick(argument)
            if agent is not None:
                index = _parse_index(argument)
                file_path = f"export/agent_{agent.name}.agent"
                try:
                    agent.export_to_file(file_path)
                except OSError as exc:
                    out.write(f"Error exporting agent: {exc}\n")
                else:
                    out.write(f"Agent {index} exported successfully to {file_path}\n")
            continue

        out.write("Unknown command.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive agent console."""
    parser = argparse.ArgumentParser(prog="toka", description="Manage and chat with agents.")
    parser.parse_args(argv)
    print(LOGO)
    print(VERSION_LINE)
    agents: list[BaseAgent] = [GPT4FreeAgent("Alpha")]
    asyncio.run(run(agents, sys.stdin, sys.stdout))
    return 0