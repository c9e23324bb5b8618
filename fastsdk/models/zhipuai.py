"""Wire types for the ZhipuAI chat service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import ChatCompletionMessage, Usage, _compact


@dataclass
class ZhipuAIChatCompletionReq:
    """A chat completion request."""

    model: str = ""
    messages: list[ChatCompletionMessage] = field(default_factory=list)
    request_id: str = ""
    do_sample: bool = False
    stream: bool = False
    temperature: float = 0.0
    top_p: float = 0.0
    max_tokens: int = 0
    stop: list[str] | None = None
    tools: list | None = None
    tool_choice: Any = None
    user_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "model": self.model,
                "messages": [m.to_dict() for m in self.messages],
                "request_id": self.request_id,
                "do_sample": self.do_sample,
                "stream": self.stream,
                "temperature": self.temperature,
                "top_p": self.top_p,
                "max_tokens": self.max_tokens,
                "stop": self.stop,
                "tools": self.tools,
                "tool_choice": self.tool_choice,
                "user_id": self.user_id,
            },
            always=("model", "messages"),
            nullable=("tool_choice",),
        )


@dataclass
class ZhipuAIChoice:
    """One generated alternative, a full message or a stream delta."""

    index: int = 0
    finish_reason: str = ""
    message: ChatCompletionMessage | None = None
    delta: dict | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "index": self.index,
                "finish_reason": self.finish_reason,
                "message": self.message.to_dict() if self.message is not None else None,
                "delta": self.delta,
            },
            always=("index", "finish_reason"),
            nullable=("message", "delta"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZhipuAIChoice:
        message = data.get("message")
        return cls(
            index=data.get("index") or 0,
            finish_reason=data.get("finish_reason") or "",
            message=ChatCompletionMessage.from_dict(message) if message is not None else None,
            delta=data.get("delta"),
        )


@dataclass
class ZhipuAIErrorBody:
    """The error object the service returns on failure."""

    code: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZhipuAIErrorBody:
        code = data.get("code")
        return cls(
            code="" if code is None else str(code),
            message=data.get("message") or "",
        )


@dataclass
class ZhipuAIChatCompletionRes:
    """A chat completion result or one chunk of a stream."""

    id: str = ""
    created: int = 0
    model: str = ""
    choices: list[ZhipuAIChoice] = field(default_factory=list)
    usage: Usage | None = None
    error: ZhipuAIErrorBody = field(default_factory=ZhipuAIErrorBody)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZhipuAIChatCompletionRes:
        usage = data.get("usage")
        return cls(
            id=data.get("id") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[ZhipuAIChoice.from_dict(c) for c in data.get("choices") or []],
            usage=Usage.from_dict(usage) if usage is not None else None,
            error=ZhipuAIErrorBody.from_dict(data.get("error") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created": self.created,
            "model": self.model,
            "choices": [c.to_dict() for c in self.choices],
            "usage": self.usage.to_dict() if self.usage is not None else None,
            "error": self.error.to_dict(),
        }