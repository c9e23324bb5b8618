"""Wire types for the Anthropic messages service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import ChatCompletionMessage, _compact


@dataclass
class AnthropicTool:
    """A tool the model may call."""

    name: str = ""
    description: str = ""
    input_schema: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


@dataclass
class AnthropicUsage:
    """Input and output token counts."""

    input_tokens: int = 0
    output_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnthropicUsage:
        return cls(
            input_tokens=data.get("input_tokens") or 0,
            output_tokens=data.get("output_tokens") or 0,
        )


@dataclass
class AnthropicErrorBody:
    """The error object the service returns on failure."""

    type: str = ""
    message: str = ""
    code: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnthropicErrorBody:
        return cls(
            type=data.get("type") or "",
            message=data.get("message") or "",
            code=data.get("code") or 0,
            status=data.get("status") or "",
        )


@dataclass
class AnthropicContent:
    """A content block, or the delta of one in a stream event."""

    type: str = ""
    text: str = ""
    partial_json: str = ""
    content_block: dict = field(default_factory=dict)
    stop_reason: str = ""
    stop_sequence: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnthropicContent:
        return cls(
            type=data.get("type") or "",
            text=data.get("text") or "",
            partial_json=data.get("partial_json") or "",
            content_block=dict(data.get("content_block") or {}),
            stop_reason=data.get("stop_reason") or "",
            stop_sequence=data.get("stop_sequence") or "",
        )


@dataclass
class AnthropicChatCompletionReq:
    """A messages request; ``metadata`` holds ``user_id`` when set."""

    model: str = ""
    messages: list[ChatCompletionMessage] = field(default_factory=list)
    max_tokens: int = 0
    metadata: dict | None = None
    stop_sequences: list[str] | None = None
    stream: bool = False
    system: Any = None
    temperature: float = 0.0
    tool_choice: Any = None
    tools: list[AnthropicTool] | None = None
    top_k: int = 0
    top_p: float = 0.0
    anthropic_version: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "model": self.model,
                "messages": [m.to_dict() for m in self.messages],
                "max_tokens": self.max_tokens,
                "metadata": self.metadata,
                "stop_sequences": self.stop_sequences,
                "stream": self.stream,
                "system": self.system,
                "temperature": self.temperature,
                "tool_choice": self.tool_choice,
                "tools": [t.to_dict() for t in self.tools] if self.tools else None,
                "top_k": self.top_k,
                "top_p": self.top_p,
                "anthropic_version": self.anthropic_version,
            },
            always=("messages",),
            nullable=("metadata", "system", "tool_choice"),
        )


@dataclass
class AnthropicChatCompletionRes:
    """A messages result or one stream event."""

    id: str = ""
    type: str = ""
    role: str = ""
    content: list[AnthropicContent] = field(default_factory=list)
    model: str = ""
    stop_reason: str = ""
    stop_sequence: str = ""
    message: dict = field(default_factory=dict)
    index: int = 0
    delta: AnthropicContent = field(default_factory=AnthropicContent)
    usage: AnthropicUsage | None = None
    error: AnthropicErrorBody | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnthropicChatCompletionRes:
        usage = data.get("usage")
        error = data.get("error")
        return cls(
            id=data.get("id") or "",
            type=data.get("type") or "",
            role=data.get("role") or "",
            content=[AnthropicContent.from_dict(c) for c in data.get("content") or []],
            model=data.get("model") or "",
            stop_reason=data.get("stop_reason") or "",
            stop_sequence=data.get("stop_sequence") or "",
            message=dict(data.get("message") or {}),
            index=data.get("index") or 0,
            delta=AnthropicContent.from_dict(data.get("delta") or {}),
            usage=AnthropicUsage.from_dict(usage) if usage is not None else None,
            error=AnthropicErrorBody.from_dict(error) if error is not None else None,
        )