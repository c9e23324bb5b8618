"""Wire types for the Tongyi Qianwen (DashScope) chat service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import ChatCompletionChoice, ChatCompletionMessage, _compact


@dataclass
class AliyunParameters:
    """Generation parameters; unset values are left out of the request."""

    result_format: str = ""
    seed: int | None = None
    max_tokens: int = 0
    top_p: float = 0.0
    top_k: int = 0
    repetition_penalty: float = 0.0
    temperature: float = 0.0
    stop: list[str] | None = None
    enable_search: bool = False
    incremental_output: bool = False
    tools: list | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "resultFormat": self.result_format,
                "seed": self.seed,
                "max_tokens": self.max_tokens,
                "top_p": self.top_p,
                "top_k": self.top_k,
                "repetition_penalty": self.repetition_penalty,
                "temperature": self.temperature,
                "stop": self.stop,
                "enable_search": self.enable_search,
                "incremental_output": self.incremental_output,
                "tools": self.tools,
            },
            nullable=("seed",),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AliyunParameters:
        return cls(
            result_format=data.get("resultFormat") or "",
            seed=data.get("seed"),
            max_tokens=data.get("max_tokens") or 0,
            top_p=data.get("top_p") or 0.0,
            top_k=data.get("top_k") or 0,
            repetition_penalty=data.get("repetition_penalty") or 0.0,
            temperature=data.get("temperature") or 0.0,
            stop=data.get("stop"),
            enable_search=bool(data.get("enable_search")),
            incremental_output=bool(data.get("incremental_output")),
            tools=data.get("tools"),
        )


@dataclass
class AliyunChatCompletionReq:
    """A chat request: the model, the conversation and its parameters."""

    model: str = ""
    messages: list[ChatCompletionMessage] = field(default_factory=list)
    parameters: AliyunParameters = field(default_factory=AliyunParameters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "input": {"messages": [m.to_dict() for m in self.messages]},
            "parameters": self.parameters.to_dict(),
        }


@dataclass
class AliyunOutput:
    """Generated output as plain text or, with the message format, as choices."""

    text: str = ""
    finish_reason: str = ""
    choices: list[ChatCompletionChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AliyunOutput:
        return cls(
            text=data.get("text") or "",
            finish_reason=data.get("finish_reason") or "",
            choices=[ChatCompletionChoice.from_dict(c) for c in data.get("choices") or []],
        )


@dataclass
class AliyunChatCompletionRes:
    """A chat result, with token counts, or an error code and message."""

    output: AliyunOutput = field(default_factory=AliyunOutput)
    input_tokens: int = 0
    output_tokens: int = 0
    request_id: str = ""
    code: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AliyunChatCompletionRes:
        usage = data.get("usage") or {}
        return cls(
            output=AliyunOutput.from_dict(data.get("output") or {}),
            input_tokens=usage.get("input_tokens") or 0,
            output_tokens=usage.get("output_tokens") or 0,
            request_id=data.get("request_id") or "",
            code=data.get("code") or "",
            message=data.get("message") or "",
        )