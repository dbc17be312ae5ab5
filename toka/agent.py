"""Chat agents that talk to chat-completion endpoints."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from toka.models import GPTRequest, GPTResponse, Message, TwitterCredentials
from toka.twitter import TwitterError, post_tweet

DEFAULT_SYSTEM_MESSAGE = "You are a helpful assistant"
DEFAULT_MODEL = "gpt-3.5-turbo"

CODER_SYSTEM_MESSAGE = (
    "You are a code generator. Your task is to generate working code based on the user's input.\n"
    "            Important: - Only generate code and comments. \n"
    "            - Do not include anything else, such as code block markers (```) or language labels. \n"
    "            - The code must be usable without removing anything.\n"
    "            - Do not include anythin but the code part itself"
)

TWITTER_SYSTEM_MESSAGE = (
    "You are an intelligent assistant specialized in writing concise and engaging tweets. "
    "Important: use 280 characters or less"
)

_OPTIONAL_TEXT_FIELDS = ("api_key", "provider")


class AgentError(Exception):
    """Raised when an agent cannot complete a request."""


def _require(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], optional: bool = False) -> Any:
    value = data.get(key)
    if value is None:
        if optional:
            return None
        raise AgentError(f"missing field `{key}`")
    if isinstance(value, bool) and kind is not bool:
        raise AgentError(f"field `{key}` has the wrong type")
    if not isinstance(value, kind):
        raise AgentError(f"field `{key}` has the wrong type")
    return value


class BaseAgent:
    """A conversational agent with chat, coder and twitter modes."""

    output_dir = Path("output")

    def __init__(
        self,
        name: str,
        api_url: str,
        api_key: str | None = None,
        system_content: str | None = None,
        model: str | None = None,
        provider: str | None = None,
    ) -> None:
        self.name = name
        self.api_url = api_url
        self.api_key = api_key
        self.client: httpx.AsyncClient | None = None
        self.model = model if model is not None else DEFAULT_MODEL
        self.provider = provider
        self.temperature: float | None = None
        self.max_tokens: int | None = None
        self.messages = [
            Message(
                content=system_content if system_content is not None else DEFAULT_SYSTEM_MESSAGE,
                role="system",
            )
        ]
        self.coder_agent = False
        self.x_agent = False
        self.twitter_credentials: TwitterCredentials | None = None

    def is_coder_agent(self) -> bool:
        return self.coder_agent

    def is_twitter_agent(self) -> bool:
        return self.x_agent

    def set_custom_provider(self, provider: str) -> None:
        self.provider = provider

    def add_system_msg(self, sys_msg: str) -> None:
        self.messages.append(Message(content=sys_msg, role="system"))

    def system_messages(self) -> list[Message]:
        return [message for message in self.messages if message.role == "system"]

    def build_request(self) -> GPTRequest:
        return GPTRequest(
            model=self.model,
            api_key=self.api_key,
            provider=self.provider or "",
            messages=list(self.messages),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    async def send_request(self, request: GPTRequest) -> str:
        """Post ``request`` to the endpoint and return the response body."""
        headers = {"Content-Type": "application/json"}
        if request.api_key is not None:
            headers["Authorization"] = f"Bearer {request.api_key}"
        payload = request.to_dict()
        if self.client is not None:
            response = await self.client.post(self.api_url, headers=headers, json=payload)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.api_url, headers=headers, json=payload)
        if not response.is_success:
            raise AgentError(f"HTTP Error: {response.status_code} {response.reason_phrase}")
        return response.text

    def extract_reply(self, body: str) -> str:
        response = GPTResponse.from_json(body)
        if not response.choices:
            raise AgentError("No response.")
        return response.choices[0].message.content

    async def handle_normal_conversation(self, user_message: str) -> str:
        self.messages.append(Message(content=user_message, role="user"))
        body = await self.send_request(self.build_request())
        reply = self.extract_reply(body)
        self.messages.append(Message(content=reply, role="assistant"))
        return reply

    async def handle_twitter_agent(self, user_message: str) -> str:
        credentials = self.twitter_credentials
        if credentials is None:
            raise AgentError("Twitter credentials not set.")
        try:
            await post_tweet(
                credentials.consumer_key,
                credentials.consumer_secret,
                credentials.access_token,
                credentials.access_token_secret,
                user_message,
                client=self.client,
            )
        except (TwitterError, httpx.HTTPError) as exc:
            raise AgentError(f"Failed to post tweet: {exc}") from exc
        return "Successfully posted tweet!"

    async def handle_coder_agent(self, user_message: str) -> str:
        if not user_message.startswith("!build"):
            return await self.handle_normal_conversation(user_message)

        if user_message.startswith("!build:"):
            words = user_message.split(":", 1)[1].split()
            filename = words[0] if words else ""
        else:
            print("Enter a filename to save the code (or leave empty to cancel):")
            filename = input().strip()

        if not filename:
            print("Normal response:")
            return await self.handle_normal_conversation(user_message)

        code = await self.handle_normal_conversation(user_message)
        file_path = self.output_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(code, encoding="utf-8")
        return f"Code saved to {file_path}"

    async def send_message(self, user_message: str) -> str:
        if self.x_agent:
            return await self.handle_twitter_agent(user_message)
        if self.coder_agent:
            return await self.handle_coder_agent(user_message)
        return await self.handle_normal_conversation(user_message)

    def _replace_system_messages(self, content: str) -> None:
        self.messages = [message for message in self.messages if message.role != "system"]
        self.messages.append(Message(content=content, role="system"))

    def convert_to_coder(self) -> None:
        if self.coder_agent:
            print("Already a coder agent")
            return
        self._replace_system_messages(CODER_SYSTEM_MESSAGE)
        self.x_agent = False
        self.coder_agent = True

    def convert_to_twitter(self) -> None:
        if self.x_agent:
            print("Already a twitter agent")
            return
        self._replace_system_messages(TWITTER_SYSTEM_MESSAGE)
        self.coder_agent = False
        self.x_agent = True

    def convert_to_chat(self) -> None:
        if not self.coder_agent and not self.x_agent:
            print("Already a chat agent")
            return
        self._replace_system_messages(DEFAULT_SYSTEM_MESSAGE)
        self.coder_agent = False
        self.x_agent = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "api_url": self.api_url,
            "api_key": self.api_key,
            "model": self.model,
            "provider": self.provider,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "messages": [message.to_dict() for message in self.messages],
            "coder_agent": self.coder_agent,
            "x_agent": self.x_agent,
            "twitter_credentials": (
                self.twitter_credentials.to_dict() if self.twitter_credentials is not None else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BaseAgent:
        """Rebuild an agent of this class from its ``to_dict`` form."""
        if not isinstance(data, Mapping):
            raise AgentError("agent data must be a JSON object")
        temperature = _require(data, "temperature", (int, float), optional=True)
        max_tokens = _require(data, "max_tokens", int, optional=True)
        if max_tokens is not None and max_tokens < 0:
            raise AgentError("field `max_tokens` must be non-negative")
        credentials = _require(data, "twitter_credentials", Mapping, optional=True)
        try:
            messages = [Message.from_dict(item) for item in _require(data, "messages", list)]
            twitter_credentials = (
                TwitterCredentials.from_dict(credentials) if credentials is not None else None
            )
        except ValueError as exc:
            raise AgentError(str(exc)) from exc

        agent = cls.__new__(cls)
        agent.name = _require(data, "name", str)
        agent.api_url = _require(data, "api_url", str)
        for field in _OPTIONAL_TEXT_FIELDS:
            setattr(agent, field, _require(data, field, str, optional=True))
        agent.client = None
        agent.model = _require(data, "model", str)
        agent.temperature = float(temperature) if temperature is not None else None
        agent.max_tokens = max_tokens
        agent.messages = messages
        agent.coder_agent = _require(data, "coder_agent", bool)
        agent.x_agent = _require(data, "x_agent", bool)
        agent.twitter_credentials = twitter_credentials
        return agent

    def export_to_file(self, file_path: str | Path) -> None:
        """Write the agent as base64-encoded JSON."""
        encoded = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(file_path).write_bytes(base64.b64encode(encoded.encode("utf-8")))

    @classmethod
    def import_from_file(cls, file_path: str | Path) -> BaseAgent:
        """Read an agent written by ``export_to_file``."""
        text = Path(file_path).read_text(encoding="utf-8")
        try:
            data = json.loads(base64.b64decode(text, validate=True).decode("utf-8"))
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise AgentError(f"invalid agent file: {exc}") from exc
        return cls.from_dict(data)