"""Chat completion request and response types."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    return False


def _compact(
    data: dict[str, Any],
    *,
    always: tuple[str, ...] = (),
    nullable: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Drop keys whose values are empty, the way optional JSON fields are left out.

    Keys in ``always`` are kept whatever they hold; keys in ``nullable`` are
    dropped only when they are None.
    """
    out: dict[str, Any] = {}
    for key, value in data.items():
        if key in always:
            out[key] = value
        elif key in nullable:
            if value is not None:
                out[key] = value
        elif not _is_empty(value):
            out[key] = value
    return out


@dataclass
class ChatCompletionMessage:
    """One message in a conversation."""

    role: str = ""
    content: Any = None
    refusal: str = ""
    name: str = ""
    function_call: dict | None = None
    tool_calls: list | None = None
    tool_call_id: str = ""
    audio: dict | None = None
    multi_content: list | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "role": self.role,
                "content": self.content,
                "refusal": self.refusal,
                "name": self.name,
                "function_call": self.function_call,
                "tool_calls": self.tool_calls,
                "tool_call_id": self.tool_call_id,
                "audio": self.audio,
            },
            always=("role", "content"),
            nullable=("function_call", "audio"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionMessage:
        return cls(
            role=data.get("role") or "",
            content=data.get("content"),
            refusal=data.get("refusal") or "",
            name=data.get("name") or "",
            function_call=data.get("function_call"),
            tool_calls=data.get("tool_calls"),
            tool_call_id=data.get("tool_call_id") or "",
            audio=data.get("audio"),
        )


@dataclass
class ChatCompletionChoice:
    """One generated alternative, either a full message or a stream delta."""

    index: int = 0
    message: ChatCompletionMessage | None = None
    delta: dict | None = None
    logprobs: Any = None
    finish_reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "index": self.index,
                "message": self.message.to_dict() if self.message is not None else None,
                "delta": self.delta,
                "logprobs": self.logprobs,
                "finish_reason": self.finish_reason or None,
            },
            always=("index", "finish_reason"),
            nullable=("message", "delta", "logprobs"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionChoice:
        message = data.get("message")
        return cls(
            index=data.get("index") or 0,
            message=ChatCompletionMessage.from_dict(message) if message is not None else None,
            delta=data.get("delta"),
            logprobs=data.get("logprobs"),
            finish_reason=data.get("finish_reason") or "",
        )


@dataclass
class Usage:
    """Token accounting for one request."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: dict | None = None
    completion_tokens_details: dict | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
            "prompt_tokens_details": self.prompt_tokens_details,
            "completion_tokens_details": self.completion_tokens_details,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Usage:
        return cls(
            prompt_tokens=data.get("prompt_tokens") or 0,
            completion_tokens=data.get("completion_tokens") or 0,
            total_tokens=data.get("total_tokens") or 0,
            prompt_tokens_details=data.get("prompt_tokens_details"),
            completion_tokens_details=data.get("completion_tokens_details"),
        )


@dataclass
class ChatCompletionRequest:
    """A chat completion request in the common wire format."""

    model: str = ""
    messages: list[ChatCompletionMessage] = field(default_factory=list)
    max_tokens: int = 0
    max_completion_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = 0
    n: int = 0
    stream: bool = False
    stop: list[str] | None = None
    presence_penalty: float = 0.0
    response_format: dict | None = None
    seed: int | None = None
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] | None = None
    logprobs: bool = False
    top_logprobs: int = 0
    user: str = ""
    functions: list | None = None
    function_call: Any = None
    tools: list | None = None
    tool_choice: Any = None
    stream_options: dict | None = None
    parallel_tool_calls: Any = None
    store: bool = False
    metadata: dict[str, str] | None = None
    modalities: list[str] | None = None
    audio: dict | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["messages"] = [message.to_dict() for message in self.messages]
        return _compact(
            data,
            always=("model", "messages"),
            nullable=(
                "response_format",
                "seed",
                "function_call",
                "tool_choice",
                "stream_options",
                "parallel_tool_calls",
                "audio",
            ),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionRequest:
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known and v is not None}
        values["messages"] = [
            ChatCompletionMessage.from_dict(message) for message in data.get("messages") or []
        ]
        return cls(**values)


@dataclass
class ChatCompletionResponse:
    """A chat completion result or one chunk of a streamed result.

    The timing fields and ``error`` describe the exchange and are never
    serialised.
    """

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChatCompletionChoice] = field(default_factory=list)
    usage: Usage | None = None
    system_fingerprint: str = ""
    prompt_annotations: list | None = None
    response_bytes: bytes | None = None
    conn_time: int = 0
    duration: int = 0
    total_time: int = 0
    error: BaseException | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "object": self.object,
                "created": self.created,
                "model": self.model,
                "choices": [choice.to_dict() for choice in self.choices],
                "usage": self.usage.to_dict() if self.usage is not None else None,
                "system_fingerprint": self.system_fingerprint,
                "prompt_annotations": self.prompt_annotations,
            },
            always=("id", "object", "created", "model", "choices", "usage"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatCompletionResponse:
        usage = data.get("usage")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[ChatCompletionChoice.from_dict(c) for c in data.get("choices") or []],
            usage=Usage.from_dict(usage) if usage is not None else None,
            system_fingerprint=data.get("system_fingerprint") or "",
            prompt_annotations=data.get("prompt_annotations"),
        )