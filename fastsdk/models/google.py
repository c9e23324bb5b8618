"""Wire types for the Gemini generateContent service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import _compact


@dataclass
class Part:
    """One piece of a message: text, inline data or a file reference.

    ``inline_data`` holds ``mime_type`` and ``data``; ``file_data`` holds
    ``file_uri`` and ``mime_type``.
    """

    text: str = ""
    inline_data: dict | None = None
    file_data: dict | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "text": self.text,
                "inline_data": _compact(self.inline_data) if self.inline_data is not None else None,
                "file_data": _compact(self.file_data) if self.file_data is not None else None,
            },
            nullable=("inline_data", "file_data"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Part:
        inline_data = data.get("inline_data")
        file_data = data.get("file_data")
        return cls(
            text=data.get("text") or "",
            inline_data=dict(inline_data) if inline_data is not None else None,
            file_data=dict(file_data) if file_data is not None else None,
        )


@dataclass
class Content:
    """A message from one role, made of parts."""

    role: str = ""
    parts: list[Part] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [p.to_dict() for p in self.parts]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Content:
        return cls(
            role=data.get("role") or "",
            parts=[Part.from_dict(p) for p in data.get("parts") or []],
        )


@dataclass
class GenerationConfig:
    """Sampling settings; unset values are left out of the request."""

    stop_sequences: list[str] | None = None
    candidate_count: int = 0
    max_output_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "stopSequences": self.stop_sequences,
                "candidateCount": self.candidate_count,
                "maxOutputTokens": self.max_output_tokens,
                "temperature": self.temperature,
                "topP": self.top_p,
                "topK": self.top_k,
            }
        )


@dataclass
class Candidate:
    """One generated answer."""

    content: Content = field(default_factory=Content)
    finish_reason: str = ""
    index: int = 0
    safety_ratings: list[dict] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Candidate:
        return cls(
            content=Content.from_dict(data.get("content") or {}),
            finish_reason=data.get("finishReason") or "",
            index=data.get("index") or 0,
            safety_ratings=list(data.get("safetyRatings") or []),
        )


@dataclass
class UsageMetadata:
    """Token counts for one request."""

    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UsageMetadata:
        return cls(
            prompt_token_count=data.get("promptTokenCount") or 0,
            candidates_token_count=data.get("candidatesTokenCount") or 0,
            total_token_count=data.get("totalTokenCount") or 0,
        )


@dataclass
class GoogleChatCompletionReq:
    """A generateContent request."""

    contents: list[Content] = field(default_factory=list)
    generation_config: GenerationConfig = field(default_factory=GenerationConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "contents": [c.to_dict() for c in self.contents],
            "generationConfig": self.generation_config.to_dict(),
        }


@dataclass
class GoogleChatCompletionRes:
    """A generateContent result; ``error`` holds the service's error object, if any."""

    candidates: list[Candidate] = field(default_factory=list)
    usage_metadata: UsageMetadata | None = None
    error: dict = field(default_factory=dict)

    @property
    def error_code(self) -> int:
        return self.error.get("code") or 0

    @property
    def error_message(self) -> str:
        return self.error.get("message") or ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GoogleChatCompletionRes:
        usage = data.get("usageMetadata")
        return cls(
            candidates=[Candidate.from_dict(c) for c in data.get("candidates") or []],
            usage_metadata=UsageMetadata.from_dict(usage) if usage is not None else None,
            error=dict(data.get("error") or {}),
        )