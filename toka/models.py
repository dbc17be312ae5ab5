"""Data types exchanged with chat-completion endpoints."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from typing import Any


def _field(data: Any, key: str, kind: type, *, optional: bool = False) -> Any:
    """Fetch ``key`` from a decoded JSON object and check its type."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        if optional:
            return None
        raise ValueError(f"missing field `{key}`")
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"field `{key}` must be a number")
        return float(value)
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"field `{key}` must be a non-negative integer")
        return value
    if not isinstance(value, kind):
        raise ValueError(f"field `{key}` must be of type {kind.__name__}")
    return value


@dataclass
class Message:
    """One chat message with its role."""

    content: str
    role: str

    def to_dict(self) -> dict[str, str]:
        return {"content": self.content, "role": self.role}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        return cls(content=_field(data, "content", str), role=_field(data, "role", str))


@dataclass
class Usage:
    """Token accounting reported by the endpoint."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Usage:
        return cls(
            prompt_tokens=_field(data, "prompt_tokens", int),
            completion_tokens=_field(data, "completion_tokens", int),
            total_tokens=_field(data, "total_tokens", int),
        )


@dataclass
class Choice:
    """One candidate answer in a completion response."""

    index: int
    message: Message
    finish_reason: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Choice:
        return cls(
            index=_field(data, "index", int),
            message=Message.from_dict(_field(data, "message", Mapping)),
            finish_reason=_field(data, "finish_reason", str),
        )


@dataclass
class GPTRequest:
    """Request payload for a chat-completion endpoint."""

    model: str
    messages: list[Message] = field(default_factory=list)
    api_key: str | None = None
    provider: str = ""
    temperature: float | None = None
    max_tokens: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "api_key": self.api_key,
            "messages": [message.to_dict() for message in self.messages],
            "model": self.model,
            "provider": self.provider,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass
class GPTResponse:
    """Response of a chat-completion endpoint."""

    id: str
    object: str
    created: int
    choices: list[Choice]
    model: str | None = None
    provider: str | None = None
    usage: Usage | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GPTResponse:
        usage = _field(data, "usage", Mapping, optional=True)
        return cls(
            id=_field(data, "id", str),
            object=_field(data, "object", str),
            created=_field(data, "created", int),
            model=_field(data, "model", str, optional=True),
            provider=_field(data, "provider", str, optional=True),
            choices=[Choice.from_dict(item) for item in _field(data, "choices", list)],
            usage=Usage.from_dict(usage) if usage is not None else None,
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> GPTResponse:
        return cls.from_dict(json.loads(text))


@dataclass
class TwitterCredentials:
    """OAuth 1.0a credentials for posting tweets."""

    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TwitterCredentials:
        names = [item.name for item in fields(cls)]
        return cls(**{name: _field(data, name, str) for name in names})