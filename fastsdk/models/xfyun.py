"""Wire types for the Spark chat and image service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import ChatCompletionMessage, _compact


@dataclass
class Header:
    """Request and response header; the request side fills ``app_id`` and ``uid``."""

    app_id: str = ""
    uid: str = ""
    code: int = 0
    message: str = ""
    sid: str = ""
    status: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "app_id": self.app_id,
                "uid": self.uid,
                "code": self.code,
                "message": self.message,
                "sid": self.sid,
                "status": self.status,
            },
            always=("app_id", "uid"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Header:
        return cls(
            app_id=data.get("app_id") or "",
            uid=data.get("uid") or "",
            code=data.get("code") or 0,
            message=data.get("message") or "",
            sid=data.get("sid") or "",
            status=data.get("status") or 0,
        )


@dataclass
class Chat:
    """Generation parameters for one request."""

    domain: str = ""
    temperature: float = 0.0
    max_tokens: int = 0
    top_k: int = 0
    chat_id: str = ""
    width: int = 0
    height: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "domain": self.domain,
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
                "top_k": self.top_k,
                "chat_id": self.chat_id,
                "width": self.width,
                "height": self.height,
            },
            always=("domain",),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chat:
        return cls(
            domain=data.get("domain") or "",
            temperature=data.get("temperature") or 0.0,
            max_tokens=data.get("max_tokens") or 0,
            top_k=data.get("top_k") or 0,
            chat_id=data.get("chat_id") or "",
            width=data.get("width") or 0,
            height=data.get("height") or 0,
        )


@dataclass
class Text:
    """A piece of generated text, or the token usage of a finished exchange."""

    role: str = ""
    content: str = ""
    index: int = 0
    content_type: str = ""
    function_call: dict | None = None
    question_tokens: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "role": self.role,
                "content": self.content,
                "index": self.index,
                "content_type": self.content_type,
                "function_call": self.function_call,
                "question_tokens": self.question_tokens,
                "prompt_tokens": self.prompt_tokens,
                "completion_tokens": self.completion_tokens,
                "total_tokens": self.total_tokens,
            },
            nullable=("function_call",),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Text:
        return cls(
            role=data.get("role") or "",
            content=data.get("content") or "",
            index=data.get("index") or 0,
            content_type=data.get("content_type") or "",
            function_call=data.get("function_call"),
            question_tokens=data.get("question_tokens") or 0,
            prompt_tokens=data.get("prompt_tokens") or 0,
            completion_tokens=data.get("completion_tokens") or 0,
            total_tokens=data.get("total_tokens") or 0,
        )


@dataclass
class Choices:
    """The text chunks of one response frame; ``status`` 2 marks the last one."""

    status: int = 0
    seq: int = 0
    text: list[Text] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "status": self.status,
                "seq": self.seq,
                "text": [t.to_dict() for t in self.text],
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Choices:
        return cls(
            status=data.get("status") or 0,
            seq=data.get("seq") or 0,
            text=[Text.from_dict(t) for t in data.get("text") or []],
        )


@dataclass
class Payload:
    """Messages and functions going out; choices and usage coming back."""

    message: list[ChatCompletionMessage] | None = None
    functions: list[dict] | None = None
    choices: Choices | None = None
    usage: Text | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.message is not None:
            out["message"] = {"text": [m.to_dict() for m in self.message]}
        if self.functions is not None:
            out["functions"] = {"text": list(self.functions)}
        if self.choices is not None:
            out["choices"] = self.choices.to_dict()
        if self.usage is not None:
            out["usage"] = {"text": self.usage.to_dict()}
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Payload:
        message = data.get("message")
        functions = data.get("functions")
        choices = data.get("choices")
        usage_text = (data.get("usage") or {}).get("text")
        return cls(
            message=(
                [ChatCompletionMessage.from_dict(m) for m in message.get("text") or []]
                if message is not None
                else None
            ),
            functions=list(functions.get("text") or []) if functions is not None else None,
            choices=Choices.from_dict(choices) if choices is not None else None,
            usage=Text.from_dict(usage_text) if usage_text is not None else None,
        )


@dataclass
class XfyunChatCompletionReq:
    """A chat or image request frame."""

    header: Header = field(default_factory=Header)
    chat: Chat | None = None
    payload: Payload = field(default_factory=Payload)

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "parameter": {"chat": self.chat.to_dict() if self.chat is not None else None},
            "payload": self.payload.to_dict(),
        }


@dataclass
class XfyunChatCompletionRes:
    """A response frame."""

    header: Header = field(default_factory=Header)
    payload: Payload = field(default_factory=Payload)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XfyunChatCompletionRes:
        return cls(
            header=Header.from_dict(data.get("header") or {}),
            payload=Payload.from_dict(data.get("payload") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"header": self.header.to_dict(), "payload": self.payload.to_dict()}