"""Wire types for the ERNIE Bot chat service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastsdk.models.chat import ChatCompletionMessage, Usage, _compact


def _lookup_fold(data: dict[str, Any], name: str) -> Any:
    """Find a key the way a case-insensitive JSON field match does."""
    if name in data:
        return data[name]
    lowered = name.lower()
    return next((value for key, value in data.items() if key.lower() == lowered), None)


@dataclass
class SearchResult:
    """One web search source cited in an answer."""

    index: int = 0
    url: str = ""
    title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact({"index": self.index, "url": self.url, "title": self.title})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResult:
        return cls(
            index=data.get("index") or 0,
            url=data.get("url") or "",
            title=data.get("title") or "",
        )


@dataclass
class BaiduChatCompletionReq:
    """A chat request."""

    messages: list[ChatCompletionMessage] = field(default_factory=list)
    temperature: float = 0.0
    top_p: float = 0.0
    penalty_score: float = 0.0
    stream: bool = False
    system: str = ""
    stop: list[str] | None = None
    disable_search: bool = False
    enable_citation: bool = False
    max_output_tokens: int = 0
    response_format: str = ""
    user_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "messages": [m.to_dict() for m in self.messages],
                "temperature": self.temperature,
                "top_p": self.top_p,
                "penalty_score": self.penalty_score,
                "stream": self.stream,
                "system": self.system,
                "stop": self.stop,
                "disable_search": self.disable_search,
                "enable_citation": self.enable_citation,
                "max_output_tokens": self.max_output_tokens,
                "response_format": self.response_format,
                "user_id": self.user_id,
            },
            always=("messages",),
        )


@dataclass
class BaiduChatCompletionRes:
    """A chat result or stream chunk, or an error code and message."""

    id: str = ""
    object: str = ""
    created: int = 0
    sentence_id: int = 0
    is_end: bool = False
    is_truncated: bool = False
    finish_reason: str = ""
    search_info: list[SearchResult] | None = None
    result: str = ""
    need_clear_history: bool = False
    flag: int = 0
    ban_round: int = 0
    usage: Usage | None = None
    error_code: int = 0
    error_msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BaiduChatCompletionRes:
        usage = data.get("usage")
        search_info = _lookup_fold(data, "SearchInfo")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            sentence_id=data.get("sentence_id") or 0,
            is_end=bool(data.get("is_end")),
            is_truncated=bool(data.get("is_truncated")),
            finish_reason=data.get("finish_reason") or "",
            search_info=(
                [SearchResult.from_dict(r) for r in search_info.get("search_results") or []]
                if search_info is not None
                else None
            ),
            result=data.get("result") or "",
            need_clear_history=bool(data.get("need_clear_history")),
            flag=data.get("flag") or 0,
            ban_round=data.get("ban_round") or 0,
            usage=Usage.from_dict(usage) if usage is not None else None,
            error_code=data.get("error_code") or 0,
            error_msg=data.get("error_msg") or "",
        )